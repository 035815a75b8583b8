"""Pathname value type.

A Pathname is the parsed, immutable form of a POSIX path: a sequence of
directory components, an optional final component split into name and
type (extension), and an absolute/relative tag.

Directory form (no final component) designates a container and renders
with a trailing separator; file form designates a leaf entry.

Strings parse as native names by default, so an entry literally named
``a*b`` is an ordinary path. Only paths parsed with ``pattern=True`` treat
``*`` and ``?`` as wildcards.
"""

import os
from dataclasses import dataclass

SEPARATOR = "/"

# Characters that make a component a pattern when parsed as one
WILD_CHARS: frozenset[str] = frozenset("*?")


def split_name(segment: str) -> tuple[str, str | None]:
    """Split a final path segment into name and type.

    The split happens on the last dot. Dots in the leading run never count
    as an extension separator, so ``.bashrc`` and ``...`` have no type.

    Args:
        segment: A single path segment without separators.

    Returns:
        Tuple of (name, type); type is None when there is no extension
        and ``""`` when the segment ends in a dot.
    """
    leading = len(segment) - len(segment.lstrip("."))
    index = segment.rfind(".")
    if index < leading:
        return segment, None
    return segment[:index], segment[index + 1 :]


def _has_wild_chars(component: str | None) -> bool:
    return component is not None and any(c in WILD_CHARS for c in component)


@dataclass(frozen=True, slots=True)
class Pathname:
    """Parsed POSIX pathname.

    Attributes:
        directory: Directory components, outermost first. ``..`` is kept
            as a literal component.
        name: Final component name, None in directory form.
        type: Final component extension. None means no extension; ``""``
            is an empty (unspecific) extension that renders as a trailing dot.
        absolute: True if the path starts at the filesystem root.
        pattern: True if the path contains wildcard components. Only set
            for paths built as patterns; folded to False when no component
            actually holds a wildcard character.
    """

    directory: tuple[str, ...] = ()
    name: str | None = None
    type: str | None = None
    absolute: bool = False
    pattern: bool = False

    def __post_init__(self) -> None:
        """Validate components and canonicalize the final component."""
        if not isinstance(self.directory, tuple):
            object.__setattr__(self, "directory", tuple(self.directory))
        for component in self.directory:
            if not component or component == "." or SEPARATOR in component:
                msg = f"Invalid directory component: {component!r}"
                raise ValueError(msg)

        if not self.name:
            if self.type:
                msg = f"Extension {self.type!r} given without a name"
                raise ValueError(msg)
            object.__setattr__(self, "name", None)
            object.__setattr__(self, "type", None)
        else:
            segment = self.file_namestring
            if SEPARATOR in segment or segment in (".", ".."):
                msg = f"Invalid final component: {segment!r}"
                raise ValueError(msg)
            # Canonical split, so equal namestrings mean equal values
            name, ext = split_name(segment)
            object.__setattr__(self, "name", name)
            object.__setattr__(self, "type", ext)

        if self.pattern and not (
            any(_has_wild_chars(c) for c in self.directory) or _has_wild_chars(self.name) or _has_wild_chars(self.type)
        ):
            object.__setattr__(self, "pattern", False)

    @classmethod
    def parse(cls, text: str | os.PathLike[str], *, pattern: bool = False) -> "Pathname":
        """Parse a POSIX path string.

        Empty and ``.`` segments are dropped; a trailing separator, ``.``
        or ``..`` makes the result directory form.

        Args:
            text: Path string or path-like object.
            pattern: Treat ``*`` and ``?`` as wildcards.

        Returns:
            Parsed Pathname.
        """
        text = os.fspath(text)
        absolute = text.startswith(SEPARATOR)
        segments = text.split(SEPARATOR)
        last = segments.pop()
        if last in (".", ".."):
            segments.append(last)
            last = ""

        directory = tuple(s for s in segments if s and s != ".")
        if not last:
            return cls(directory=directory, absolute=absolute, pattern=pattern)

        name, ext = split_name(last)
        return cls(directory=directory, name=name, type=ext, absolute=absolute, pattern=pattern)

    @property
    def is_wild(self) -> bool:
        """True if any component is a wildcard pattern."""
        return self.pattern

    @property
    def file_namestring(self) -> str:
        """Final component rendered as a single segment (empty in directory form)."""
        if self.name is None:
            return ""
        if self.type is None:
            return self.name
        return f"{self.name}.{self.type}"

    @property
    def directory_namestring(self) -> str:
        """Root marker and directory components, each followed by a separator."""
        head = SEPARATOR if self.absolute else ""
        return head + "".join(f"{c}{SEPARATOR}" for c in self.directory)

    def __str__(self) -> str:
        return self.directory_namestring + self.file_namestring

    def __fspath__(self) -> str:
        # The empty relative path means "here" to the OS
        return str(self) or "."
