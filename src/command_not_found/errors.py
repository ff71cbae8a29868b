"""Error types for the handler."""

from __future__ import annotations

import click

from command_not_found.config import USAGE_EXIT_CODE


class UsageError(click.UsageError):
    """Wrong number of arguments on the command line."""

    exit_code = USAGE_EXIT_CODE


class HandlerError(Exception):
    """Unrecoverable filesystem fault hit while scanning.

    The process reports the message and exits with the OS error number.
    """

    def __init__(self, path: str, errno: int | None, strerror: str | None) -> None:
        self.path = path
        self.errno = errno
        self.strerror = strerror or "Unknown error"
        super().__init__(self.describe())

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> HandlerError:
        """Build the error from the ``OSError`` that caused it."""
        return cls(path, exc.errno, exc.strerror)

    def describe(self) -> str:
        return f"{self.path}: {self.strerror}"

    @property
    def exit_code(self) -> int:
        return self.errno or 1


class ManifestOpenError(HandlerError):
    """A discovered manifest file could not be opened."""

    def describe(self) -> str:
        return f"Failed to open {self.path} ({self.strerror})"


class TraversalStatError(HandlerError):
    """The directory walk could not stat an entry."""

    def describe(self) -> str:
        return f"{self.path}: stat failed! ({self.strerror})"
