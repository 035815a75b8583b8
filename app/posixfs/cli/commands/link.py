"""Link commands.

Provides commands to create symbolic and hard links and to read the
target of a symbolic link.
"""

from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from posixfs.errors import PosixFsError
from posixfs.fs.kinds import EntryKind, file_kind
from posixfs.fs.links import make_hard_link, make_symlink, read_link, resolve_link
from posixfs.utils.formatting import console, format_path, print_error, print_success

app = typer.Typer(
    help="Create and read symbolic and hard links.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def create(
    target: Annotated[str, typer.Argument(help="What the link points to.")],
    link: Annotated[str, typer.Argument(help="Path of the link to create.")],
    hard: Annotated[
        bool,
        typer.Option("--hard", help="Create a hard link instead of a symbolic link."),
    ] = False,
) -> None:
    """Create a link to TARGET at LINK."""
    try:
        created = make_hard_link(target, link) if hard else make_symlink(target, link)
    except (PosixFsError, OSError) as e:
        _fail(e)

    kind_label = "hard link" if hard else "symbolic link"
    print_success(f"Created {kind_label} {escape(str(created))} -> {escape(target)}")


@app.command()
def read(
    path: Annotated[str, typer.Argument(help="Symbolic link to read.")],
    resolve: Annotated[
        bool,
        typer.Option("--resolve", "-r", help="Show the target as an absolute path."),
    ] = False,
) -> None:
    """Show the target of a symbolic link."""
    try:
        entry_kind = file_kind(path)
    except (PosixFsError, OSError) as e:
        _fail(e)

    if entry_kind is not EntryKind.SYMLINK:
        print_error(f"Not a symbolic link: {escape(path)} is {entry_kind.value}")
        raise typer.Exit(code=1)

    try:
        target = resolve_link(path) if resolve else read_link(path)
    except (PosixFsError, OSError) as e:
        _fail(e)

    console.print(f"{format_path(path, EntryKind.SYMLINK)} -> {format_path(target)}", soft_wrap=True)


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    print_error(escape(str(error)))
    raise typer.Exit(code=1) from error
