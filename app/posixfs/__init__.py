"""posixfs - Path-semantic filesystem operations for POSIX systems.

Pathnames are parsed into immutable values with an explicit directory form
and file form. On top of them sit entry classification, scoped working
directory changes, directory iteration, recursive walks and deletion,
link handling and permission translation.
"""

from posixfs.errors import (
    EmptyComponentError,
    InternalConsistencyError,
    NotADirectoryError,  # noqa: A004
    PosixFsError,
    RootNotFoundError,
    WildPathError,
)
from posixfs.fs import (
    DirectoryInclusion,
    DirectoryIterator,
    EntryKind,
    MissingRoot,
    Permission,
    PermissionSet,
    WalkPolicy,
    classify,
    default_base,
    delete_directory_and_files,
    delete_tree,
    directory_exists,
    file_exists,
    file_kind,
    file_permissions,
    format_permissions,
    is_directory,
    is_file,
    is_symlink,
    iter_walk,
    list_directory,
    make_hard_link,
    make_symlink,
    map_directory,
    mode_to_permissions,
    open_iteration,
    parse_permissions,
    permissions_to_mode,
    plan_deletion,
    probe,
    read_link,
    resolve_link,
    set_file_permissions,
    walk,
    working_directory,
)
from posixfs.paths import (
    Pathname,
    as_pathname,
    directory_part,
    is_absolute,
    is_directory_form,
    is_relative,
    merge,
    namestring,
    native_path,
    strip_prefix,
    to_absolute,
    to_directory_form,
    to_file_form,
)

__version__ = "0.1.0"

__all__ = [
    "DirectoryInclusion",
    "DirectoryIterator",
    "EmptyComponentError",
    "EntryKind",
    "InternalConsistencyError",
    "MissingRoot",
    "NotADirectoryError",
    "Pathname",
    "Permission",
    "PermissionSet",
    "PosixFsError",
    "RootNotFoundError",
    "WalkPolicy",
    "WildPathError",
    "__version__",
    "as_pathname",
    "classify",
    "default_base",
    "delete_directory_and_files",
    "delete_tree",
    "directory_exists",
    "directory_part",
    "file_exists",
    "file_kind",
    "file_permissions",
    "format_permissions",
    "is_absolute",
    "is_directory",
    "is_directory_form",
    "is_file",
    "is_relative",
    "is_symlink",
    "iter_walk",
    "list_directory",
    "make_hard_link",
    "make_symlink",
    "map_directory",
    "merge",
    "mode_to_permissions",
    "namestring",
    "native_path",
    "open_iteration",
    "parse_permissions",
    "permissions_to_mode",
    "plan_deletion",
    "probe",
    "read_link",
    "resolve_link",
    "set_file_permissions",
    "strip_prefix",
    "to_absolute",
    "to_directory_form",
    "to_file_form",
    "walk",
    "working_directory",
]
