"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from posixfs import __version__
from posixfs.cli.commands import config, fs, link, perms
from posixfs.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="posixfs",
    help="Path-semantic filesystem operations for POSIX systems.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"posixfs version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """posixfs - Path-semantic filesystem operations.

    Classify entries, list and walk directories, delete trees, manage
    links and translate permission bits.
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.add_typer(fs.app, name="fs")
app.add_typer(link.app, name="link")
app.add_typer(perms.app, name="perms")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
