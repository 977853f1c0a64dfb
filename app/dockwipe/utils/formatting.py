"""Shared Rich consoles and message helpers.

Progress and results go to stdout; warnings, errors and log records go to
stderr so they survive output redirection.
"""

import sys

from rich.console import Console
from rich.table import Table

from dockwipe.core.theme import get_theme


def _make_console(stderr: bool = False) -> Console:
    """Create a themed console, forcing truecolor on a real terminal."""
    stream = sys.stderr if stderr else sys.stdout
    return Console(
        theme=get_theme(),
        stderr=stderr,
        color_system="truecolor" if stream.isatty() else None,
    )


console = _make_console()
err_console = _make_console(stderr=True)


def create_table(title: str, columns: list[str]) -> Table:
    """Create a zebra-striped table with one column per header.

    Args:
        title: Table title.
        columns: Column headers, in display order.

    Returns:
        Empty Rich Table.
    """
    table = Table(
        title=title,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    for column in columns:
        table.add_column(column, overflow="ellipsis")
    return table


def print_step(message: str) -> None:
    """Announce the start of a workflow step."""
    console.print(f"[bold_header]==>[/] {message}")


def print_section(title: str) -> None:
    """Print a horizontal rule with a title."""
    console.rule(f"[bold_header]{title}[/]", style="border")


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {message}")
