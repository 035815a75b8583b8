"""Recursive deletion built on the walker.

The tree is walked post-order so each directory is already empty when its
turn comes, which is what rmdir requires. Symbolic links are unlinked and
never followed.
"""

import logging
import os

from posixfs.fs.kinds import EntryKind, classify, probe
from posixfs.fs.walker import DirectoryInclusion, MissingRoot, WalkPolicy, iter_walk, walk
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import PathInput, as_pathname, native_path, to_absolute, to_file_form

logger = logging.getLogger(__name__)


def delete_tree(root: PathInput, *, on_missing_root: MissingRoot = MissingRoot.FAIL) -> int:
    """Delete a directory and everything below it.

    If the root is itself a symbolic link, only the link is removed.

    Args:
        root: Directory to delete.
        on_missing_root: FAIL raises RootNotFoundError for a missing root,
            IGNORE makes deleting a missing root a no-op.

    Returns:
        Number of entries removed, the root included.

    Raises:
        RootNotFoundError: If the root is missing and on_missing_root is FAIL.
        NotADirectoryError: If the root is not a directory.
        OSError: If an entry cannot be removed. Entries removed before the
            failure stay removed.
    """
    root_path = to_absolute(as_pathname(root))
    link = _symlink_root(root_path)
    if link is not None:
        os.unlink(native_path(link))
        logger.debug("Removed symbolic link root %s", link)
        return 1

    root_path = _canonical_root(root_path)
    removed = 0

    def remove(node: Pathname) -> None:
        nonlocal removed
        if node.name is None:
            os.rmdir(native_path(node))
        else:
            os.unlink(native_path(node))
        removed += 1
        logger.debug("Removed %s", node)

    walk(root_path, remove, _deletion_policy(on_missing_root), include_root=True, absolute=True)
    return removed


def delete_directory_and_files(root: PathInput, *, on_missing_root: MissingRoot = MissingRoot.FAIL) -> int:
    """Alias of delete_tree() under its legacy name."""
    return delete_tree(root, on_missing_root=on_missing_root)


def plan_deletion(root: PathInput, *, on_missing_root: MissingRoot = MissingRoot.FAIL) -> list[Pathname]:
    """List what delete_tree() would remove, in removal order.

    Nothing is modified.

    Returns:
        Absolute Pathnames, directories in directory form.
    """
    root_path = to_absolute(as_pathname(root))
    link = _symlink_root(root_path)
    if link is not None:
        return [link]
    root_path = _canonical_root(root_path)
    return list(iter_walk(root_path, _deletion_policy(on_missing_root), include_root=True, absolute=True))


def _deletion_policy(on_missing_root: MissingRoot) -> WalkPolicy:
    return WalkPolicy(
        include_directories=DirectoryInclusion.POST_ORDER,
        on_missing_root=on_missing_root,
        follow_symlinks=False,
    )


def _canonical_root(root: Pathname) -> Pathname:
    """Canonical path of an existing root, else the root unchanged.

    Walked entries are then never addressed through a `..` component.
    """
    resolved = probe(root)
    return root if resolved is None else resolved


def _symlink_root(root: Pathname) -> Pathname | None:
    """File form of the root if the root is a symbolic link, else None."""
    if root.name is None:
        if not root.directory or root.directory[-1] == "..":
            return None
        root = to_file_form(root)
    if classify(root) is EntryKind.SYMLINK:
        return root
    return None
