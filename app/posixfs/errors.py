"""Exception hierarchy for posixfs.

User-facing failures derive from PosixFsError. Precondition failures on
directory operations also derive from the matching builtin OSError subclass
so callers catching ``NotADirectoryError``/``FileNotFoundError`` keep working.

InternalConsistencyError sits outside the PosixFsError tree: it
signals a defect (an OS value outside the recognized domain), not a
condition the caller can handle.
"""

import builtins


class PosixFsError(Exception):
    """Base exception for posixfs errors."""

    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path


class WildPathError(PosixFsError, ValueError):
    """Raised when a wildcard path is given where a concrete path is required."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Wildcard path not allowed here: {path}", path)


class EmptyComponentError(PosixFsError, ValueError):
    """Raised when a conversion would produce an empty final component."""

    def __init__(self, path: object, reason: str = "no component left to use as a name") -> None:
        super().__init__(f"Cannot convert {str(path)!r} to file form: {reason}", path)


class NotADirectoryError(PosixFsError, builtins.NotADirectoryError):  # noqa: A001
    """Raised when a directory operation is given something that is not a directory."""

    def __init__(self, path: object) -> None:
        PosixFsError.__init__(self, f"Not a directory: {path}", path)


class RootNotFoundError(PosixFsError, FileNotFoundError):
    """Raised when the root of a recursive walk does not exist."""

    def __init__(self, path: object) -> None:
        PosixFsError.__init__(self, f"Walk root does not exist: {path}", path)


class InternalConsistencyError(RuntimeError):
    """Raised when the OS reports a value outside the recognized domain.

    This is a bug indicator and must not be caught and retried.
    """

    def __init__(self, message: str, path: object = None) -> None:
        super().__init__(message)
        self.path = path
