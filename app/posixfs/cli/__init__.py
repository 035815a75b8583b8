"""CLI package for posixfs.

This package contains the Typer application and all subcommands.
"""

from posixfs.cli.main import app

__all__ = ["app"]
