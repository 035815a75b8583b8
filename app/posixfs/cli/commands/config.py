"""Configuration commands.

Provides commands to show the effective settings and to write a default
config file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape
from rich.syntax import Syntax

from posixfs.core.config import ConfigError, Settings, load_settings, save_settings, settings_to_dict
from posixfs.core.paths import ensure_config_dir, get_config_path
from posixfs.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show and initialize posixfs settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings and where they come from."""
    config_path = get_config_path()
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if config_path.exists():
        print_info(f"Config file: {escape(str(config_path))}")
    else:
        print_info(f"No config file at {escape(str(config_path))}, showing defaults.")

    console.print(Syntax(tomli_w.dumps(settings_to_dict(settings)), "toml", background_color="default"))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with the default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_error(f"Config already exists: {escape(str(config_path))} (use --force to overwrite)")
        raise typer.Exit(code=1)
    if config_path.exists():
        print_warning(f"Overwriting {escape(str(config_path))}")

    try:
        ensure_config_dir()
        saved = save_settings(Settings(), config_path)
    except (RuntimeError, ConfigError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default settings to {escape(str(saved))}")
