"""Symbolic and hard link creation and reading.

Relative link targets are interpreted from the directory that holds the
link, the same way the OS resolves a relative symlink. Creation runs
inside working_directory() on that directory.
"""

import logging
import os

from posixfs.fs.ambient import working_directory
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import (
    PathInput,
    as_pathname,
    directory_part,
    merge,
    native_path,
    to_absolute,
    to_file_form,
)

logger = logging.getLogger(__name__)


def _link_location(link: PathInput) -> tuple[Pathname, str]:
    """Split a link path into its absolute directory and entry name."""
    path = to_file_form(to_absolute(as_pathname(link)))
    return directory_part(path), path.file_namestring


def make_symlink(target: PathInput, link: PathInput) -> Pathname:
    """Create a symbolic link.

    Args:
        target: Link target. Strings and os.PathLike values are stored
            exactly as given; a Pathname is rendered first. A relative
            target is resolved by the OS from the link's directory.
        link: Path of the link to create.

    Returns:
        Absolute file-form path of the created link.

    Raises:
        FileExistsError: If something already exists at ``link``.
        OSError: If the link cannot be created.
    """
    target_text = native_path(target) if isinstance(target, Pathname) else os.fspath(target)
    directory, name = _link_location(link)
    with working_directory(directory):
        os.symlink(target_text, name)
    logger.debug("Created symbolic link %s%s -> %s", directory, name, target_text)
    return Pathname.parse(f"{directory}{name}")


def make_hard_link(target: PathInput, link: PathInput) -> Pathname:
    """Create a hard link.

    Args:
        target: Existing entry to link to. A relative target is taken from
            the link's directory.
        link: Path of the link to create.

    Returns:
        Absolute file-form path of the created link.

    Raises:
        FileNotFoundError: If the target does not exist.
        FileExistsError: If something already exists at ``link``.
    """
    target_text = native_path(target)
    directory, name = _link_location(link)
    with working_directory(directory):
        os.link(target_text, name, follow_symlinks=False)
    logger.debug("Created hard link %s%s -> %s", directory, name, target_text)
    return Pathname.parse(f"{directory}{name}")


def read_link(path: PathInput) -> Pathname:
    """Read the raw target of a symbolic link.

    Raises:
        OSError: If the path is not a symbolic link or cannot be read.
    """
    directory, name = _link_location(path)
    return Pathname.parse(os.readlink(native_path(directory) + name))


def resolve_link(path: PathInput) -> Pathname:
    """Read a symbolic link's target as an absolute path.

    A relative target is merged onto the link's directory. Only this one
    link is resolved; the target may itself be a link.
    """
    directory, _ = _link_location(path)
    return merge(read_link(path), directory)
