"""Pathname normalization.

Pure operations over Pathname values: absolute/relative checks, merging
onto a base, directory-form/file-form conversion and prefix stripping.
Only to_absolute touches process state (the default base and the current
working directory).
"""

import os
from dataclasses import replace

from posixfs.errors import EmptyComponentError, WildPathError
from posixfs.paths.models import SEPARATOR, Pathname, split_name

# Anything accepted where a path is expected
PathInput = Pathname | str | os.PathLike[str]


def as_pathname(value: PathInput) -> Pathname:
    """Coerce a string, path-like object or Pathname to a Pathname."""
    if isinstance(value, Pathname):
        return value
    return Pathname.parse(value)


def _require_concrete(path: Pathname) -> Pathname:
    if path.is_wild:
        raise WildPathError(path)
    return path


def directory_pathname(text: str) -> Pathname:
    """Parse a string that is known to name a directory into directory form."""
    return Pathname.parse(text.rstrip(SEPARATOR) + SEPARATOR)


def is_absolute(path: PathInput) -> bool:
    """Check whether a path starts at the filesystem root."""
    return as_pathname(path).absolute


def is_relative(path: PathInput) -> bool:
    """Check whether a path is relative."""
    return not as_pathname(path).absolute


def is_directory_form(path: PathInput) -> bool:
    """Check whether a path is in directory form.

    True iff the final component is absent. An empty (unspecific)
    extension without a name counts as absent.
    """
    return as_pathname(path).name is None


def merge(path: PathInput, base: PathInput) -> Pathname:
    """Merge a relative path onto a base.

    The base's directory components are prepended and its absolute tag is
    inherited. The path keeps its own final component; the base's final
    component is ignored. Absolute paths are returned unchanged.

    Args:
        path: Path to merge.
        base: Base to merge onto.

    Returns:
        Merged Pathname.
    """
    path = as_pathname(path)
    if path.absolute:
        return path
    base = as_pathname(base)
    return replace(
        path,
        directory=base.directory + path.directory,
        absolute=base.absolute,
        pattern=path.pattern or base.pattern,
    )


def to_absolute(path: PathInput, base: PathInput | None = None) -> Pathname:
    """Compute the absolute form of a path.

    A relative path is merged onto ``base`` (the ambient default base when
    omitted). If the result is still relative, because the base was itself
    relative or there is no default base, it is merged again onto the
    current working directory.

    Args:
        path: Path to make absolute.
        base: Optional base directory.

    Returns:
        Absolute Pathname.

    Raises:
        WildPathError: If the path contains wildcard components.
    """
    path = _require_concrete(as_pathname(path))
    if path.absolute:
        return path

    if base is None:
        from posixfs.fs.ambient import default_base

        base = default_base()
    if base is not None:
        path = merge(path, base)
    if not path.absolute:
        path = merge(path, directory_pathname(os.getcwd()))
    return path


def strip_prefix(path: PathInput, base: PathInput) -> Pathname:
    """Remove the directory components a path shares with a base.

    Computes the longest common leading run of directory components and
    returns a relative path holding the rest of ``path``'s components and
    its final component. Components are only shared when both paths have
    the same absolute tag.

    Note:
        With no shared prefix the result is ``path``'s components
        unchanged but tagged relative. Comparing unrelated trees therefore
        yields a relative path that does not point below ``base``.

    Args:
        path: Path to strip.
        base: Base whose leading components are removed.

    Returns:
        Relative Pathname.
    """
    path = as_pathname(path)
    base = as_pathname(base)

    shared = 0
    if path.absolute == base.absolute:
        for mine, theirs in zip(path.directory, base.directory):
            if mine != theirs:
                break
            shared += 1

    return replace(path, directory=path.directory[shared:], absolute=False)


def to_directory_form(path: PathInput) -> Pathname:
    """Convert a path to directory form.

    The final component (name and extension as a single segment) becomes a
    new trailing directory component. Directory-form paths are returned
    unchanged.

    Raises:
        WildPathError: If the path contains wildcard components.
    """
    path = _require_concrete(as_pathname(path))
    if path.name is None:
        return path
    return Pathname(directory=(*path.directory, path.file_namestring), absolute=path.absolute)


def to_file_form(path: PathInput) -> Pathname:
    """Convert a path to file form.

    The last directory component is reparsed as a name/extension pair and
    removed from the directory sequence. File-form paths are returned
    unchanged.

    Raises:
        WildPathError: If the path contains wildcard components.
        EmptyComponentError: If there is no directory component to use, or
            the last one is ``..``.
    """
    path = _require_concrete(as_pathname(path))
    if path.name is not None:
        return path
    if not path.directory:
        raise EmptyComponentError(path, "path has no directory components")

    last = path.directory[-1]
    if last == "..":
        raise EmptyComponentError(path, "'..' does not name an entry")

    name, ext = split_name(last)
    return Pathname(directory=path.directory[:-1], name=name, type=ext, absolute=path.absolute)


def directory_part(path: PathInput) -> Pathname:
    """Return the containing directory: the path with its final component cleared."""
    return replace(as_pathname(path), name=None, type=None)


def namestring(path: PathInput) -> str:
    """Render a path as a string, with a trailing separator in directory form."""
    return str(as_pathname(path))


def native_path(path: PathInput) -> str:
    """Render a concrete path for handing to the OS.

    Raises:
        WildPathError: If the path contains wildcard components.
    """
    return os.fspath(_require_concrete(as_pathname(path)))
