"""Permission commands.

Provides commands to show and replace the permission bits of a file as
named flags.
"""

import json
from enum import Enum
from typing import Annotated, NoReturn

import typer
from rich.markup import escape
from rich.table import Table

from posixfs.errors import PosixFsError
from posixfs.fs.permissions import (
    Permission,
    PermissionSet,
    file_permissions,
    format_permissions,
    parse_permissions,
    permissions_to_mode,
    set_file_permissions,
)
from posixfs.utils.formatting import console, format_path, print_error, print_success

app = typer.Typer(
    help="Show and set permission bits as named flags.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for permission display."""

    TABLE = "table"
    JSON = "json"


@app.command()
def show(
    path: Annotated[str, typer.Argument(help="File whose permissions to show.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show the permissions of a file."""
    try:
        permissions = file_permissions(path)
    except (PosixFsError, OSError) as e:
        _fail(e)

    mode = permissions_to_mode(permissions)

    if output_format == OutputFormat.JSON:
        payload = {
            "path": path,
            "mode": f"{mode:04o}",
            "permissions": _sorted_names(permissions),
        }
        console.print_json(json.dumps(payload))
        return

    console.print(
        f"{format_path(path)}: [bold]{mode:04o}[/bold] {format_permissions(permissions)}",
        soft_wrap=True,
    )
    table = Table(show_header=True, header_style="bold_header", border_style="border")
    table.add_column("Permission")
    table.add_column("Granted", justify="center")
    for permission in Permission:
        granted = "[success]yes[/]" if permission in permissions else "[dim]no[/dim]"
        table.add_row(permission.value, granted)
    console.print(table)


@app.command("set")
def set_permissions(
    path: Annotated[str, typer.Argument(help="File whose permissions to replace.")],
    spec: Annotated[
        str,
        typer.Argument(help="Octal mode (0755) or comma-separated names (user_read,user_write)."),
    ],
) -> None:
    """Replace the permissions of a file."""
    try:
        permissions = parse_permissions(spec)
    except ValueError as e:
        print_error(f"Invalid permissions {escape(spec)!r}: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    try:
        applied = set_file_permissions(path, permissions)
    except (PosixFsError, OSError) as e:
        _fail(e)

    mode = permissions_to_mode(applied)
    print_success(f"Set {escape(path)} to {mode:04o} ({format_permissions(applied)})")


# === Private helper functions ===


def _sorted_names(permissions: PermissionSet) -> list[str]:
    """Permission names in declaration order."""
    return [p.value for p in Permission if p in permissions]


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    print_error(escape(str(error)))
    raise typer.Exit(code=1) from error
