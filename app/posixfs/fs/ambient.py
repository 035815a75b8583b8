"""Ambient current directory management.

The process working directory and the default path base are process-wide
state. Anything that changes them goes through working_directory(), which
restores the exact prior values on every exit path so nested scopes stay
correct.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager

from posixfs.paths.models import Pathname
from posixfs.paths.normalize import PathInput, as_pathname, to_absolute, to_directory_form

logger = logging.getLogger(__name__)

# Base used by to_absolute() when no explicit base is given
_default_base: Pathname | None = None


def default_base() -> Pathname | None:
    """Get the ambient default path base.

    Returns:
        Absolute directory-form Pathname while inside a working_directory()
        scope, None otherwise.
    """
    return _default_base


@contextmanager
def working_directory(path: PathInput) -> Iterator[Pathname]:
    """Make a directory the current working directory for a scope.

    Saves the current working directory and default base, changes into
    ``path`` and sets the default base to it. Both are restored on exit,
    including when the body raises.

    Args:
        path: Directory to enter. File-form paths are taken as naming the
            directory itself.

    Yields:
        The absolute directory-form Pathname that was entered.

    Raises:
        OSError: If the directory cannot be entered.
    """
    global _default_base

    target = to_directory_form(to_absolute(as_pathname(path)))
    saved_cwd = os.getcwd()
    saved_base = _default_base

    os.chdir(target)
    _default_base = target
    logger.debug("Entered %s (from %s)", target, saved_cwd)
    try:
        yield target
    finally:
        _default_base = saved_base
        os.chdir(saved_cwd)
        logger.debug("Restored working directory %s", saved_cwd)
