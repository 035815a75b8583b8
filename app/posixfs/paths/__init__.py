"""Pathname parsing and normalization.

This module provides the immutable Pathname value type and the pure
operations converting between directory form and file form, merging
relative paths onto a base, and stripping shared prefixes.
"""

from posixfs.paths.models import SEPARATOR, WILD_CHARS, Pathname, split_name
from posixfs.paths.normalize import (
    as_pathname,
    directory_pathname,
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

__all__ = [
    "SEPARATOR",
    "WILD_CHARS",
    "Pathname",
    "as_pathname",
    "directory_pathname",
    "directory_part",
    "is_absolute",
    "is_directory_form",
    "is_relative",
    "merge",
    "namestring",
    "native_path",
    "split_name",
    "strip_prefix",
    "to_absolute",
    "to_directory_form",
    "to_file_form",
]
