"""Filesystem operations over Pathnames.

This module provides entry classification, the ambient working directory
scope, directory iteration, recursive walking and deletion, link handling
and permission translation.
"""

from posixfs.fs.ambient import default_base, working_directory
from posixfs.fs.deleter import delete_directory_and_files, delete_tree, plan_deletion
from posixfs.fs.iterator import DirectoryIterator, list_directory, map_directory, open_iteration
from posixfs.fs.kinds import (
    EntryKind,
    classify,
    directory_exists,
    file_exists,
    file_kind,
    is_directory,
    is_file,
    is_symlink,
    probe,
)
from posixfs.fs.links import make_hard_link, make_symlink, read_link, resolve_link
from posixfs.fs.permissions import (
    Permission,
    PermissionSet,
    file_permissions,
    format_permissions,
    mode_to_permissions,
    parse_permissions,
    permissions_to_mode,
    set_file_permissions,
)
from posixfs.fs.walker import (
    DEFAULT_POLICY,
    DirectoryInclusion,
    MissingRoot,
    WalkPolicy,
    accept_all,
    iter_walk,
    walk,
)

__all__ = [
    "DEFAULT_POLICY",
    "DirectoryInclusion",
    "DirectoryIterator",
    "EntryKind",
    "MissingRoot",
    "Permission",
    "PermissionSet",
    "WalkPolicy",
    "accept_all",
    "classify",
    "default_base",
    "delete_directory_and_files",
    "delete_tree",
    "directory_exists",
    "file_exists",
    "file_kind",
    "file_permissions",
    "format_permissions",
    "is_directory",
    "is_file",
    "is_symlink",
    "iter_walk",
    "list_directory",
    "make_hard_link",
    "make_symlink",
    "map_directory",
    "mode_to_permissions",
    "open_iteration",
    "plan_deletion",
    "parse_permissions",
    "permissions_to_mode",
    "probe",
    "read_link",
    "resolve_link",
    "set_file_permissions",
    "walk",
    "working_directory",
]
