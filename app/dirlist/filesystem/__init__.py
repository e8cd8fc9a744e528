"""Filesystem access module.

This module provides the FileSystem interface over the operating system
primitives and its POSIX implementation.
"""

from dirlist.filesystem.base import DOT_ENTRIES, PATH_MAX, FileSystem
from dirlist.filesystem.posix import PosixFileSystem

__all__ = [
    "DOT_ENTRIES",
    "PATH_MAX",
    "FileSystem",
    "PosixFileSystem",
]
