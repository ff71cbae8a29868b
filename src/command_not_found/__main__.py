"""Allow running the handler with ``python -m command_not_found``."""

from command_not_found.cli import main

if __name__ == "__main__":
    main()
