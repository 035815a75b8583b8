"""Entry kind classification and existence probes.

Classification maps the type bits reported by stat/lstat to an EntryKind.
A missing entry is a normal outcome (EntryKind.ABSENT, or None from the
probes), never an exception.
"""

import logging
import os
import stat
from enum import Enum

from posixfs.errors import InternalConsistencyError
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import (
    PathInput,
    as_pathname,
    directory_pathname,
    native_path,
    to_file_form,
)

logger = logging.getLogger(__name__)


class EntryKind(str, Enum):
    """Kind of filesystem entry.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (only reported when links are not followed).
        SOCKET: Unix domain socket.
        PIPE: Named pipe (FIFO).
        CHARACTER_DEVICE: Character device.
        BLOCK_DEVICE: Block device.
        ABSENT: No entry exists at the path.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SOCKET = "socket"
    PIPE = "pipe"
    CHARACTER_DEVICE = "character_device"
    BLOCK_DEVICE = "block_device"
    ABSENT = "absent"


_KIND_BY_FORMAT: dict[int, EntryKind] = {
    stat.S_IFREG: EntryKind.FILE,
    stat.S_IFDIR: EntryKind.DIRECTORY,
    stat.S_IFLNK: EntryKind.SYMLINK,
    stat.S_IFSOCK: EntryKind.SOCKET,
    stat.S_IFIFO: EntryKind.PIPE,
    stat.S_IFCHR: EntryKind.CHARACTER_DEVICE,
    stat.S_IFBLK: EntryKind.BLOCK_DEVICE,
}


def kind_from_mode(mode: int, path: object = None) -> EntryKind:
    """Map an st_mode value to an EntryKind.

    Args:
        mode: Mode as reported by stat/lstat.
        path: Path the mode belongs to, for error reporting.

    Returns:
        The concrete EntryKind.

    Raises:
        InternalConsistencyError: If the type bits are not recognized.
    """
    kind = _KIND_BY_FORMAT.get(stat.S_IFMT(mode))
    if kind is None:
        logger.critical("Unknown file type bits %o for %s", stat.S_IFMT(mode), path)
        msg = f"Unrecognized file type bits {stat.S_IFMT(mode):o} for {path}"
        raise InternalConsistencyError(msg, path)
    return kind


def classify(path: PathInput, follow_symlinks: bool = False) -> EntryKind:
    """Classify the entry at a path.

    Args:
        path: Path to classify. Directory-form paths name the directory.
        follow_symlinks: Use stat (follow links) instead of lstat.

    Returns:
        EntryKind of the entry, or EntryKind.ABSENT if nothing exists there.

    Raises:
        WildPathError: If the path contains wildcard components.
        InternalConsistencyError: If the OS reports unknown type bits.
        OSError: For failures other than a missing entry.
    """
    target = _stat_path(path)
    try:
        info = os.stat(target) if follow_symlinks else os.lstat(target)
    except FileNotFoundError:
        return EntryKind.ABSENT
    return kind_from_mode(info.st_mode, path)


def file_kind(path: PathInput) -> EntryKind:
    """Classify the entry at a path without following symbolic links."""
    return classify(path, follow_symlinks=False)


def is_directory(path: PathInput) -> bool:
    """Check whether a path resolves to a directory (following links)."""
    return classify(path, follow_symlinks=True) is EntryKind.DIRECTORY


def is_file(path: PathInput) -> bool:
    """Check whether a path resolves to a regular file (following links)."""
    return classify(path, follow_symlinks=True) is EntryKind.FILE


def is_symlink(path: PathInput) -> bool:
    """Check whether a path is itself a symbolic link."""
    return classify(path, follow_symlinks=False) is EntryKind.SYMLINK


def probe(path: PathInput) -> Pathname | None:
    """Resolve a path to the canonical path of an existing entry.

    Symbolic links are resolved. The result is absolute, in directory form
    for directories and file form otherwise.

    Args:
        path: Path to probe.

    Returns:
        Canonical Pathname, or None if the entry (or a link's target) does
        not exist.
    """
    target = _stat_path(path)
    try:
        info = os.stat(target)
    except FileNotFoundError:
        return None

    resolved = os.path.realpath(target)
    if stat.S_ISDIR(info.st_mode):
        return directory_pathname(resolved)
    return Pathname.parse(resolved)


def file_exists(path: PathInput) -> Pathname | None:
    """Return the canonical path of an existing entry, or None."""
    return probe(path)


def directory_exists(path: PathInput) -> Pathname | None:
    """Return the canonical directory-form path of an existing directory.

    Returns:
        Canonical Pathname if the path resolves to a directory, None if it
        does not exist or is not a directory.
    """
    resolved = probe(path)
    if resolved is None or resolved.name is not None:
        return None
    return resolved


def _stat_path(path: PathInput) -> str:
    """Render a path for stat/lstat.

    A trailing separator makes lstat follow a final symlink, so directory
    forms are converted to file form first. Paths with no component to
    convert (the root, ``..``) are used as they are.
    """
    pathname = as_pathname(path)
    if pathname.name is None and pathname.directory and pathname.directory[-1] != "..":
        pathname = to_file_form(pathname)
    return native_path(pathname)
