"""CLI commands for posixfs.

This package contains all subcommand implementations.
"""

from posixfs.cli.commands import config, fs, link, perms

__all__ = ["config", "fs", "link", "perms"]
