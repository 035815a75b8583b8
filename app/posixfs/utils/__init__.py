"""Utility modules for posixfs.

This module exports commonly used utility functions.
"""

from posixfs.utils.formatting import (
    console,
    create_entry_table,
    err_console,
    format_kind,
    format_path,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_entry_table",
    "err_console",
    "format_kind",
    "format_path",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
