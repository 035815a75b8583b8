"""Lazy iteration over one directory's entries.

DirectoryIterator is a pull-based cursor: each next_entry() call reads one
entry from the OS directory handle and returns it as a Pathname relative to
the iterated directory. While the iterator is open the process working
directory (and default base) is the iterated directory, so relative paths
handled by the caller resolve against it.
"""

import logging
import os
from collections.abc import Callable, Iterator
from contextlib import ExitStack, contextmanager
from typing import TypeVar

from posixfs.errors import NotADirectoryError, WildPathError
from posixfs.fs.ambient import working_directory
from posixfs.fs.kinds import EntryKind, classify
from posixfs.paths.models import Pathname
from posixfs.paths.normalize import PathInput, as_pathname, merge, native_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DirectoryIterator:
    """Cursor over the entries of a single directory.

    The sequence is lazy, finite and cannot be restarted. ``.`` and ``..``
    are never returned; the order of entries is whatever the OS reports.

    Entries that classify as directories (after following symbolic links
    when ``follow_symlinks`` is set) are returned in directory form, all
    others in file form. The returned names themselves are never resolved.

    Use as a context manager, or through open_iteration():

        with open_iteration("/etc") as entries:
            while (entry := entries.next_entry()) is not None:
                ...

    Args:
        path: Directory to iterate.
        follow_symlinks: Classify symlinks by their target.
    """

    def __init__(self, path: PathInput, *, follow_symlinks: bool = True) -> None:
        self._path = as_pathname(path)
        if self._path.is_wild:
            raise WildPathError(self._path)
        self._follow_symlinks = follow_symlinks
        self._stack: ExitStack | None = None
        self._handle: Iterator[os.DirEntry[str]] | None = None
        self._directory: Pathname | None = None
        self._exhausted = False
        self._closed = False

    @property
    def directory(self) -> Pathname:
        """Absolute directory-form path of the directory being iterated."""
        if self._directory is None:
            msg = "Directory iterator is not open"
            raise RuntimeError(msg)
        return self._directory

    @property
    def closed(self) -> bool:
        """True once the OS handle has been released."""
        return self._closed

    def open(self) -> "DirectoryIterator":
        """Acquire the directory handle and enter the directory.

        Returns:
            This iterator.

        Raises:
            NotADirectoryError: If the path does not designate a directory.
            OSError: If the directory cannot be entered or read.
        """
        if self._stack is not None or self._closed:
            msg = "Directory iterator cannot be reopened"
            raise RuntimeError(msg)
        if classify(self._path, follow_symlinks=True) is not EntryKind.DIRECTORY:
            raise NotADirectoryError(self._path)

        stack = ExitStack()
        try:
            self._directory = stack.enter_context(working_directory(self._path))
            self._handle = stack.enter_context(os.scandir(native_path(self._directory)))
        except BaseException:
            stack.close()
            self._closed = True
            raise
        self._stack = stack
        logger.debug("Opened directory iterator on %s", self._directory)
        return self

    def close(self) -> None:
        """Release the directory handle and restore the working directory.

        Safe to call more than once; the handle is released exactly once.
        """
        if self._closed:
            return
        self._closed = True
        self._exhausted = True
        stack, self._stack = self._stack, None
        self._handle = None
        if stack is not None:
            stack.close()
            logger.debug("Closed directory iterator on %s", self._directory)

    def next_entry(self) -> Pathname | None:
        """Pull the next entry.

        Returns:
            Relative Pathname of the next entry, or None once the directory
            is exhausted (and on every call after that).
        """
        if self._exhausted or self._handle is None:
            return None

        for entry in self._handle:
            if entry.name in (".", ".."):
                continue
            return self._entry_pathname(entry)

        self._exhausted = True
        return None

    def _entry_pathname(self, entry: os.DirEntry[str]) -> Pathname:
        kind = classify(entry.path, follow_symlinks=self._follow_symlinks)
        if kind is EntryKind.DIRECTORY:
            return Pathname(directory=(entry.name,))
        return Pathname(name=entry.name)

    def __enter__(self) -> "DirectoryIterator":
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> "DirectoryIterator":
        return self

    def __next__(self) -> Pathname:
        entry = self.next_entry()
        if entry is None:
            raise StopIteration
        return entry


@contextmanager
def open_iteration(path: PathInput, *, follow_symlinks: bool = True) -> Iterator[DirectoryIterator]:
    """Open a DirectoryIterator for the duration of a ``with`` block.

    Args:
        path: Directory to iterate.
        follow_symlinks: Classify symlinks by their target.

    Yields:
        The open DirectoryIterator. It is closed on exit from the block,
        however the block is left.

    Raises:
        NotADirectoryError: If the path does not designate a directory.
        WildPathError: If the path contains wildcard components.
    """
    with DirectoryIterator(path, follow_symlinks=follow_symlinks) as iterator:
        yield iterator


def list_directory(
    path: PathInput,
    *,
    absolute: bool = False,
    follow_symlinks: bool = True,
) -> list[Pathname]:
    """Collect the entries of a directory.

    Args:
        path: Directory to list.
        absolute: Return absolute paths instead of paths relative to the
            directory.
        follow_symlinks: Classify symlinks by their target.

    Returns:
        List of entry Pathnames in OS order.
    """
    return map_directory(lambda entry: entry, path, absolute=absolute, follow_symlinks=follow_symlinks)


def map_directory(
    function: Callable[[Pathname], T],
    path: PathInput,
    *,
    absolute: bool = False,
    follow_symlinks: bool = True,
) -> list[T]:
    """Call a function on each entry of a directory and collect the results.

    The function runs inside the iteration scope, so the working directory
    is the iterated directory while it executes.

    Args:
        function: Called once per entry.
        path: Directory to iterate.
        absolute: Pass absolute paths instead of relative ones.
        follow_symlinks: Classify symlinks by their target.

    Returns:
        List of the function's results in OS order.
    """
    with open_iteration(path, follow_symlinks=follow_symlinks) as entries:
        if absolute:
            return [function(merge(entry, entries.directory)) for entry in entries]
        return [function(entry) for entry in entries]
