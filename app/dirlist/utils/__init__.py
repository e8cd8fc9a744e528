"""Utility modules for dirlist.

This module exports commonly used utility functions.
"""

from dirlist.utils.formatting import (
    describe_error,
    err_console,
    print_path_error,
    print_warning,
    stdout_is_terminal,
)

__all__ = [
    "describe_error",
    "err_console",
    "print_path_error",
    "print_warning",
    "stdout_is_terminal",
]
