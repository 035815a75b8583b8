"""Permission bits as sets of named flags.

The twelve permission bits of a POSIX mode map one-to-one onto Permission
members through a fixed table, so conversions in both directions are
lossless.
"""

import logging
import os
import stat
from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType

from posixfs.paths.normalize import PathInput, native_path

logger = logging.getLogger(__name__)


class Permission(str, Enum):
    """A single permission bit."""

    USER_READ = "user_read"
    USER_WRITE = "user_write"
    USER_EXEC = "user_exec"
    GROUP_READ = "group_read"
    GROUP_WRITE = "group_write"
    GROUP_EXEC = "group_exec"
    OTHER_READ = "other_read"
    OTHER_WRITE = "other_write"
    OTHER_EXEC = "other_exec"
    SET_USER_ID = "set_user_id"
    SET_GROUP_ID = "set_group_id"
    STICKY = "sticky"


PermissionSet = frozenset[Permission]

PERMISSION_BITS: MappingProxyType[Permission, int] = MappingProxyType(
    {
        Permission.USER_READ: stat.S_IRUSR,
        Permission.USER_WRITE: stat.S_IWUSR,
        Permission.USER_EXEC: stat.S_IXUSR,
        Permission.GROUP_READ: stat.S_IRGRP,
        Permission.GROUP_WRITE: stat.S_IWGRP,
        Permission.GROUP_EXEC: stat.S_IXGRP,
        Permission.OTHER_READ: stat.S_IROTH,
        Permission.OTHER_WRITE: stat.S_IWOTH,
        Permission.OTHER_EXEC: stat.S_IXOTH,
        Permission.SET_USER_ID: stat.S_ISUID,
        Permission.SET_GROUP_ID: stat.S_ISGID,
        Permission.STICKY: stat.S_ISVTX,
    }
)

PERMISSIONS_BY_BIT: MappingProxyType[int, Permission] = MappingProxyType(
    {bit: permission for permission, bit in PERMISSION_BITS.items()}
)

# All twelve bits; everything else in st_mode is file type
PERMISSION_MASK = 0o7777


def mode_to_permissions(mode: int) -> PermissionSet:
    """Convert a mode bitmask to the set of permissions it grants.

    File type bits are ignored.
    """
    return frozenset(permission for bit, permission in PERMISSIONS_BY_BIT.items() if mode & bit)


def permissions_to_mode(permissions: Iterable[Permission | str]) -> int:
    """Convert permissions to a mode bitmask.

    Args:
        permissions: Permission members or their string values.

    Raises:
        ValueError: If a name is not a Permission.
    """
    mode = 0
    for permission in permissions:
        mode |= PERMISSION_BITS[Permission(permission)]
    return mode


def file_permissions(path: PathInput) -> PermissionSet:
    """Read the permissions of a file (following symbolic links)."""
    return mode_to_permissions(os.stat(native_path(path)).st_mode)


def set_file_permissions(path: PathInput, permissions: Iterable[Permission | str]) -> PermissionSet:
    """Replace the permissions of a file (following symbolic links).

    Args:
        path: File whose mode to change.
        permissions: Complete new permission set.

    Returns:
        The permission set that was applied.
    """
    mode = permissions_to_mode(permissions)
    os.chmod(native_path(path), mode)
    logger.debug("Set mode %04o on %s", mode, path)
    return mode_to_permissions(mode)


def parse_permissions(spec: str) -> PermissionSet:
    """Parse an octal mode (``0755``) or comma-separated permission names.

    Raises:
        ValueError: If the spec is neither.
    """
    text = spec.strip()
    if text and all(c in "01234567" for c in text):
        mode = int(text, 8)
        if mode & ~PERMISSION_MASK:
            msg = f"Mode {text} has bits outside the permission mask"
            raise ValueError(msg)
        return mode_to_permissions(mode)
    return frozenset(Permission(name.strip()) for name in text.split(",") if name.strip())


def format_permissions(permissions: Iterable[Permission]) -> str:
    """Render permissions the way ``ls -l`` does, e.g. ``rwsr-x--T``."""
    granted = set(permissions)
    triads = (
        (Permission.USER_READ, Permission.USER_WRITE, Permission.USER_EXEC, Permission.SET_USER_ID, "s"),
        (Permission.GROUP_READ, Permission.GROUP_WRITE, Permission.GROUP_EXEC, Permission.SET_GROUP_ID, "s"),
        (Permission.OTHER_READ, Permission.OTHER_WRITE, Permission.OTHER_EXEC, Permission.STICKY, "t"),
    )
    parts: list[str] = []
    for read, write, execute, special, letter in triads:
        parts.append("r" if read in granted else "-")
        parts.append("w" if write in granted else "-")
        if special in granted:
            parts.append(letter if execute in granted else letter.upper())
        else:
            parts.append("x" if execute in granted else "-")
    return "".join(parts)
