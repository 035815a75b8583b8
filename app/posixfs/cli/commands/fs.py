"""Filesystem inspection and cleanup commands.

Provides commands to classify entries, list directories, walk trees and
delete them recursively.
"""

import json
from enum import Enum
from fnmatch import fnmatch
from typing import Annotated, NoReturn

import typer
from rich.markup import escape

from posixfs.core.config import ConfigError, WalkSettings, load_settings
from posixfs.errors import PosixFsError
from posixfs.fs.deleter import delete_tree, plan_deletion
from posixfs.fs.iterator import map_directory
from posixfs.fs.kinds import EntryKind, classify, file_kind
from posixfs.fs.walker import DirectoryInclusion, MissingRoot, iter_walk
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import merge, to_absolute, to_directory_form
from posixfs.utils.formatting import (
    console,
    create_entry_table,
    format_kind,
    format_path,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Classify, list, walk and delete filesystem entries.",
    invoke_without_command=True,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for listings."""

    TABLE = "table"
    JSON = "json"


@app.command()
def kind(
    path: Annotated[str, typer.Argument(help="Path to classify.")],
    follow: Annotated[
        bool,
        typer.Option("--follow", "-L", help="Classify the target of a symbolic link."),
    ] = False,
) -> None:
    """Show the kind of a filesystem entry."""
    try:
        entry_kind = classify(path, follow_symlinks=follow)
    except (PosixFsError, OSError) as e:
        _fail(e)

    console.print(f"{format_path(path, entry_kind)}: {format_kind(entry_kind)}", soft_wrap=True)


@app.command("ls")
def list_entries(
    path: Annotated[str, typer.Argument(help="Directory to list.")] = ".",
    absolute: Annotated[
        bool,
        typer.Option("--absolute", "-a", help="Show absolute paths."),
    ] = False,
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
    """List the entries of a directory."""
    settings = _load_walk_settings()

    try:
        # Entries are classified inside the iteration scope, relative to the directory
        rows = map_directory(
            lambda entry: (entry, file_kind(entry)),
            path,
            absolute=absolute,
            follow_symlinks=settings.follow_symlinks,
        )
    except (PosixFsError, OSError) as e:
        _fail(e)

    if not settings.show_hidden:
        rows = [(entry, k) for entry, k in rows if not _entry_segment(entry).startswith(".")]
    rows.sort(key=lambda row: str(row[0]))

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([{"path": str(entry), "kind": k.value} for entry, k in rows]))
        return

    if not rows:
        print_info(f"No entries in {escape(path)}.")
        return

    table = create_entry_table(f"Entries of {escape(path)}")
    for entry, k in rows:
        table.add_row(format_kind(k), format_path(entry, k))
    console.print(table)
    console.print(f"\n[dim]{len(rows)} entries[/dim]")


@app.command("walk")
def walk_tree(
    root: Annotated[str, typer.Argument(help="Directory to walk.")] = ".",
    order: Annotated[
        str | None,
        typer.Option(
            "--order",
            "-o",
            help="When directories are shown: none, pre or post.",
        ),
    ] = None,
    ignore_missing: Annotated[
        bool,
        typer.Option("--ignore-missing", help="Succeed quietly if the root does not exist."),
    ] = False,
    pattern: Annotated[
        str | None,
        typer.Option("--glob", "-g", help="Only show files whose name matches this pattern."),
    ] = None,
    absolute: Annotated[
        bool,
        typer.Option("--absolute", "-a", help="Show absolute paths."),
    ] = False,
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
    """Walk a directory tree and show the visited entries."""
    settings = _load_walk_settings()
    updates: dict[str, object] = {}
    if order is not None:
        try:
            updates["include_directories"] = DirectoryInclusion.parse(order)
        except ValueError:
            print_error(f"Unknown order {escape(order)!r}: use none, pre or post.")
            raise typer.Exit(code=1) from None
    if ignore_missing:
        updates["on_missing_root"] = MissingRoot.IGNORE
    settings = settings.model_copy(update=updates)

    def matches(node: Pathname) -> bool:
        return pattern is None or node.name is None or fnmatch(node.file_namestring, pattern)

    try:
        start = to_directory_form(to_absolute(root))
        nodes = list(iter_walk(start, settings.to_policy(matches)))
        rows = [(node, file_kind(merge(node, start))) for node in nodes]
    except (PosixFsError, OSError) as e:
        _fail(e)

    if absolute:
        rows = [(merge(node, start), k) for node, k in rows]

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([{"path": str(node), "kind": k.value} for node, k in rows]))
        return

    if not rows:
        print_info("Nothing to show.")
        return

    table = create_entry_table(f"Walk of {escape(root)}")
    for node, k in rows:
        table.add_row(format_kind(k), format_path(node, k))
    console.print(table)
    console.print(f"\n[dim]{len(rows)} entries[/dim]")


@app.command("rm")
def remove_tree(
    root: Annotated[str, typer.Argument(help="Directory to delete recursively.")],
    ignore_missing: Annotated[
        bool,
        typer.Option("--ignore-missing", help="Succeed quietly if the root does not exist."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a directory and everything below it."""
    on_missing_root = MissingRoot.IGNORE if ignore_missing else MissingRoot.FAIL

    if dry_run:
        try:
            planned = plan_deletion(root, on_missing_root=on_missing_root)
        except (PosixFsError, OSError) as e:
            _fail(e)
        _print_deletion_plan(planned)
        return

    if not yes:
        confirmed = typer.confirm(f"Delete {root} and everything below it?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        removed = delete_tree(root, on_missing_root=on_missing_root)
    except (PosixFsError, OSError) as e:
        _fail(e)

    if removed == 0:
        print_info(f"Nothing to delete: {escape(root)} does not exist.")
    else:
        print_success(f"Removed {removed} entries.")


# === Private helper functions ===


def _load_walk_settings() -> WalkSettings:
    """Load walk settings, exiting with an error on invalid config."""
    try:
        return load_settings().walk
    except ConfigError as e:
        _fail(e)


def _print_deletion_plan(paths: list[Pathname]) -> None:
    """Display planned deletions."""
    if not paths:
        print_info("Nothing to delete.")
        return

    table = create_entry_table("Planned Deletions (dry-run)", with_kind=False)
    for path in paths:
        table.add_row(format_path(path, EntryKind.DIRECTORY if path.name is None else None))
    console.print(table)
    print_info(f"Dry-run: {len(paths)} path(s) would be deleted.")


def _entry_segment(entry: Pathname) -> str:
    """Name of the entry a path designates, in either form."""
    if entry.name is not None:
        return entry.file_namestring
    return entry.directory[-1] if entry.directory else ""


def _fail(error: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    print_error(escape(str(error)))
    raise typer.Exit(code=1) from error
