"""Data models for dirlist.

This module exports the core data structures used throughout the application.
"""

from dirlist.models.entry import EXECUTE_BITS, DirEntry, FileKind, FileMetadata
from dirlist.models.listing import HiddenPolicy, PendingDirectory, is_dot_entry

__all__ = [
    "EXECUTE_BITS",
    "DirEntry",
    "FileKind",
    "FileMetadata",
    "HiddenPolicy",
    "PendingDirectory",
    "is_dot_entry",
]
