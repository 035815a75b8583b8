"""Recursive directory walking.

walk() and iter_walk() traverse a tree under a WalkPolicy:

- DirectoryInclusion.NONE: directories are descended but never visited.
- DirectoryInclusion.PRE_ORDER: a directory is tested and visited before
  its contents. A directory rejected by the filter is pruned: nothing
  below it is visited.
- DirectoryInclusion.POST_ORDER: a directory's contents are always
  walked first; the filter only decides whether the directory itself is
  visited afterwards.

Files are visited when the filter accepts them. Directories are read one
at a time through list_directory(), so no directory handle or working
directory change is held while callbacks run.
"""

import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from posixfs.errors import NotADirectoryError, RootNotFoundError
from posixfs.fs.iterator import list_directory
from posixfs.fs.kinds import EntryKind, classify
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import PathInput, as_pathname, merge, native_path, to_absolute, to_directory_form

logger = logging.getLogger(__name__)

# Legacy names for the directory inclusion orders
_LEGACY_INCLUSION_NAMES: dict[str, str] = {
    "breadth-first": "pre_order",
    "breadth_first": "pre_order",
    "depth-first": "post_order",
    "depth_first": "post_order",
}

_INCLUSION_ALIASES: dict[str, str] = {
    "pre": "pre_order",
    "pre-order": "pre_order",
    "post": "post_order",
    "post-order": "post_order",
}


class DirectoryInclusion(str, Enum):
    """When directories are visited relative to their contents.

    Attributes:
        NONE: Directories are descended into but never visited.
        PRE_ORDER: Directories are visited before their contents.
        POST_ORDER: Directories are visited after their contents.
    """

    NONE = "none"
    PRE_ORDER = "pre_order"
    POST_ORDER = "post_order"

    @classmethod
    def parse(cls, value: str) -> "DirectoryInclusion":
        """Parse an inclusion name, accepting the legacy order names.

        ``breadth-first`` maps to PRE_ORDER and ``depth-first`` to
        POST_ORDER. Both legacy walks are depth-first recursions; the
        names only ever described when directories are visited.

        Raises:
            ValueError: If the name is not recognized.
        """
        key = value.strip().lower()
        if key in _LEGACY_INCLUSION_NAMES:
            replacement = _LEGACY_INCLUSION_NAMES[key]
            logger.warning("Directory inclusion %r is deprecated, use %r", value, replacement)
            key = replacement
        return cls(_INCLUSION_ALIASES.get(key, key))


class MissingRoot(str, Enum):
    """What to do when the walk root does not exist.

    Attributes:
        FAIL: Raise RootNotFoundError.
        IGNORE: Return without visiting anything.
    """

    FAIL = "fail"
    IGNORE = "ignore"


def accept_all(path: Pathname) -> bool:
    """Filter that accepts every path."""
    return True


@dataclass(frozen=True, slots=True)
class WalkPolicy:
    """Configuration for a recursive walk.

    Attributes:
        include_directories: When directories are visited.
        on_missing_root: Behavior when the root does not exist.
        filter: Predicate deciding whether a node is visited (and, for
            pre-order directories, descended).
        follow_symlinks: Descend into symbolic links to directories. When
            False they are reported as files.
    """

    include_directories: DirectoryInclusion = DirectoryInclusion.NONE
    on_missing_root: MissingRoot = MissingRoot.FAIL
    filter: Callable[[Pathname], bool] = field(default=accept_all)
    follow_symlinks: bool = True


DEFAULT_POLICY = WalkPolicy()


def iter_walk(
    root: PathInput,
    policy: WalkPolicy | None = None,
    *,
    include_root: bool = False,
    absolute: bool = False,
) -> Iterator[Pathname]:
    """Lazily yield the nodes a walk visits, in visiting order.

    Each directory's entries are read when the walk reaches it, after the
    nodes before it have been consumed. Sibling order is unspecified.

    Args:
        root: Directory to walk.
        policy: Walk configuration (defaults to DEFAULT_POLICY).
        include_root: Treat the root as a directory node that can be
            visited and, in pre-order, pruned.
        absolute: Yield absolute paths instead of paths relative to the root.

    Yields:
        Visited Pathnames, directories in directory form.

    Raises:
        RootNotFoundError: If the root is missing and the policy says FAIL.
        NotADirectoryError: If the root exists but is not a directory.
    """
    policy = policy or DEFAULT_POLICY
    start = _resolve_root(root, policy)
    if start is None:
        return

    def report(node: Pathname) -> Pathname:
        return merge(node, start) if absolute else node

    top = Pathname()
    order = policy.include_directories
    if include_root and order is DirectoryInclusion.PRE_ORDER:
        if not policy.filter(report(top)):
            return
        yield report(top)

    yield from _walk_directory(top, start, policy, report, frozenset())

    if include_root and order is DirectoryInclusion.POST_ORDER and policy.filter(report(top)):
        yield report(top)


def walk(
    root: PathInput,
    visit: Callable[[Pathname], object],
    policy: WalkPolicy | None = None,
    *,
    include_root: bool = False,
    absolute: bool = False,
) -> None:
    """Walk a directory tree, calling ``visit`` on each visited node.

    Paths passed to ``visit`` are relative to the root unless ``absolute``
    is set. ``visit`` runs in the caller's working directory. An exception
    raised by ``visit`` or the filter stops the walk and propagates.

    Args:
        root: Directory to walk.
        visit: Called once per visited node.
        policy: Walk configuration (defaults to DEFAULT_POLICY).
        include_root: Treat the root as a directory node.
        absolute: Pass absolute paths to ``visit``.

    Raises:
        RootNotFoundError: If the root is missing and the policy says FAIL.
        NotADirectoryError: If the root exists but is not a directory.
    """
    for node in iter_walk(root, policy, include_root=include_root, absolute=absolute):
        visit(node)


def _resolve_root(root: PathInput, policy: WalkPolicy) -> Pathname | None:
    """Convert the root to absolute directory form and check it exists."""
    start = to_directory_form(to_absolute(as_pathname(root)))
    kind = classify(start, follow_symlinks=True)
    if kind is EntryKind.ABSENT:
        if policy.on_missing_root is MissingRoot.IGNORE:
            logger.debug("Walk root %s does not exist, nothing to do", start)
            return None
        raise RootNotFoundError(root)
    if kind is not EntryKind.DIRECTORY:
        raise NotADirectoryError(root)
    return start


def _walk_directory(
    relative: Pathname,
    start: Pathname,
    policy: WalkPolicy,
    report: Callable[[Pathname], Pathname],
    ancestors: frozenset[tuple[int, int]],
) -> Iterator[Pathname]:
    """Yield the visited nodes below one directory."""
    location = merge(relative, start)
    identity = _identity(location)
    if identity in ancestors:
        logger.warning("Skipping %s: symbolic link cycle", location)
        return
    ancestors = ancestors | {identity}

    for entry in list_directory(location, follow_symlinks=policy.follow_symlinks):
        node = merge(entry, relative)
        if node.name is not None:
            if policy.filter(report(node)):
                yield report(node)
            continue

        order = policy.include_directories
        if order is DirectoryInclusion.NONE:
            yield from _walk_directory(node, start, policy, report, ancestors)
        elif order is DirectoryInclusion.PRE_ORDER:
            if policy.filter(report(node)):
                yield report(node)
                yield from _walk_directory(node, start, policy, report, ancestors)
        else:
            yield from _walk_directory(node, start, policy, report, ancestors)
            if policy.filter(report(node)):
                yield report(node)


def _identity(directory: Pathname) -> tuple[int, int]:
    info = os.stat(native_path(directory))
    return info.st_dev, info.st_ino
