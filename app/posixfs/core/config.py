"""Settings for posixfs.

Walk defaults used by the CLI are read from ~/.config/posixfs/config.toml:

    [walk]
    include_directories = "post_order"
    on_missing_root = "ignore"
    follow_symlinks = false
    show_hidden = true

A missing file means defaults. Invalid content is an error.
"""

import logging
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from posixfs.core.paths import get_config_path
from posixfs.fs.walker import DirectoryInclusion, MissingRoot, WalkPolicy, accept_all
from posixfs.paths.models import Pathname

logger = logging.getLogger(__name__)


class WalkSettings(BaseModel):
    """Default walk behavior for CLI commands.

    Attributes:
        include_directories: When directories are reported during a walk.
        on_missing_root: What to do when a walk root does not exist.
        follow_symlinks: Descend into symbolic links to directories.
        show_hidden: Include dot-files in listings and walks.
    """

    model_config = ConfigDict(extra="forbid")

    include_directories: Annotated[
        DirectoryInclusion,
        Field(description="When directories are reported during a walk"),
    ] = DirectoryInclusion.NONE
    on_missing_root: Annotated[
        MissingRoot,
        Field(description="Behavior when a walk root does not exist"),
    ] = MissingRoot.FAIL
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symbolic links to directories"),
    ] = True
    show_hidden: Annotated[
        bool,
        Field(description="Include dot-files in listings and walks"),
    ] = True

    @field_validator("include_directories", mode="before")
    @classmethod
    def parse_inclusion(cls, v: object) -> object:
        """Accept legacy and short inclusion names."""
        if isinstance(v, str):
            try:
                return DirectoryInclusion.parse(v)
            except ValueError:
                return v
        return v

    def to_policy(self, filter: Callable[[Pathname], bool] | None = None) -> WalkPolicy:
        """Build a WalkPolicy from these settings.

        Args:
            filter: Optional node filter. Hidden entries are excluded on
                top of it when show_hidden is False.

        Returns:
            WalkPolicy carrying the configured behavior.
        """
        predicate = filter or accept_all
        if not self.show_hidden:
            predicate = _skip_hidden(predicate)

        return WalkPolicy(
            include_directories=self.include_directories,
            on_missing_root=self.on_missing_root,
            filter=predicate,
            follow_symlinks=self.follow_symlinks,
        )


class Settings(BaseModel):
    """Top-level posixfs settings."""

    model_config = ConfigDict(extra="forbid")

    walk: WalkSettings = Field(default_factory=WalkSettings)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when a config file is required but not found."""


class ConfigParseError(ConfigError):
    """Raised when a config file cannot be parsed."""


def load_settings(path: Path | None = None, *, required: bool = False) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.
        required: Raise instead of returning defaults when the file is missing.

    Returns:
        Validated Settings object.

    Raises:
        ConfigNotFoundError: If the file is missing and ``required`` is set.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if required:
            raise ConfigNotFoundError(f"Config not found: {config_path}")
        logger.debug("No config at %s, using defaults", config_path)
        return Settings()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace().

    Args:
        settings: The Settings object to save.
        path: Path to save to. If None, uses the default config path.

    Returns:
        Path where the settings were saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings to a dictionary for TOML serialization."""
    return settings.model_dump(mode="json")


def _skip_hidden(predicate: Callable[[Pathname], bool]) -> Callable[[Pathname], bool]:
    """Wrap a filter so paths with any dot-file component are rejected.

    Meant for walks reporting paths relative to the root.
    """

    def visible(path: Pathname) -> bool:
        segments = (*path.directory, path.file_namestring)
        return not any(s.startswith(".") for s in segments) and predicate(path)

    return visible
