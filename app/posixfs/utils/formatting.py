"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from posixfs.core.theme import get_theme
from posixfs.fs.kinds import EntryKind


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_entry_table(title: str, *, with_kind: bool = True) -> Table:
    """Create a pre-configured table for displaying filesystem entries.

    Args:
        title: Table title.
        with_kind: Include a Kind column before the Path column.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    if with_kind:
        table.add_column("Kind", width=16)
    table.add_column("Path", no_wrap=True)
    return table


def format_kind(kind: EntryKind) -> str:
    """Format an entry kind with its theme style."""
    return f"[kind.{kind.value}]{kind.value}[/]"


def format_path(path: object, kind: EntryKind | None = None) -> str:
    """Format a path for display, styled by kind when one is given.

    Paths are escaped so brackets in file names are not read as markup.
    """
    text = escape(str(path) or ".")
    if kind is None:
        return text
    return f"[kind.{kind.value}]{text}[/]"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
