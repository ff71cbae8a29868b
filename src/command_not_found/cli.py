"""Command-line interface for the command-not-found handler."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from command_not_found.config import Settings
from command_not_found.errors import HandlerError, UsageError
from command_not_found.report import make_console, render_report
from command_not_found.scanner.manifest import SearchRequest, scan_request

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings, console: Console) -> None:
    """Send log records to the console when logging was requested."""
    if settings.log_level is None:
        return

    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


class PositionalCommand(click.Command):
    """Command that takes every token verbatim as a positional argument.

    A shell hook passes the mistyped word through unchanged, so ``-v``,
    ``--help`` and ``--`` are command names here, not options.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


@click.command(
    cls=PositionalCommand,
    options_metavar="",
    context_settings={"help_option_names": []},
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="COMMAND_NAME SEARCH_ROOT")
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Suggest packages that provide a command which is not installed.

    Every *.filelist manifest below SEARCH_ROOT is searched for executables
    named COMMAND_NAME, or close to it. Set COMMAND_NOT_FOUND_LOG_LEVEL to
    see log output.
    """
    if len(args) != 2:
        raise UsageError(f"expected 2 arguments, got {len(args)}", ctx=ctx)

    console = make_console()
    configure_logging(Settings.from_env(), console)

    try:
        request = SearchRequest(target_command=args[0], root_path=args[1])
    except ValueError as e:
        raise UsageError(str(e), ctx=ctx) from e

    logger.debug(f"Searching {request.root_path} for '{request.target_command}'")

    try:
        result = scan_request(request)
    except HandlerError as e:
        console.print(escape(str(e)))
        ctx.exit(e.exit_code)

    render_report(result, request.target_command, console)


def main() -> None:
    """Entry point."""
    cli(prog_name="command-not-found-handler")


if __name__ == "__main__":
    main()
