"""Render scan results as the suggestion report."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from command_not_found.config import INSTALL_COMMAND, PACKAGE_SOURCE
from command_not_found.scanner.manifest import ScanResult


def make_console() -> Console:
    """Console writing to standard error without re-wrapping lines."""
    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def render_report(result: ScanResult, target_command: str, console: Console) -> None:
    """Print the suggestion report for a finished scan.

    Exact matches win over fuzzy ones; with neither, a plain
    "command not found" line is printed.

    Args:
        result: Completed scan
        target_command: Command the user tried to run
        console: Console to print on
    """
    command = escape(target_command)

    if result.exact_matches:
        console.print(f"The command '[bold]{command}[/bold]' is not currently installed")
        console.print()
        console.print(f"However, the following {PACKAGE_SOURCE} package(s) provide it:")
        console.print()
        for match in result.exact_matches:
            console.print(f"  [green]{escape(match.package_name)}[/green]")
        _print_install_hint(console)
    elif result.fuzzy_matches:
        console.print(f"No command '[bold]{command}[/bold]' found. Did you mean:")
        console.print()
        for fuzzy in result.fuzzy_matches:
            console.print(f"  {escape(fuzzy.describe())}")
        _print_install_hint(console)
    else:
        console.print(f"{command}: command not found")


def _print_install_hint(console: Console) -> None:
    console.print()
    console.print(f"Install one of them with '[cyan]{INSTALL_COMMAND} <package>[/cyan]'")
