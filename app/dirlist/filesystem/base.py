"""Abstract base class for filesystem access.

This module defines the FileSystem interface the listing pipeline uses
for every operating system call: directory enumeration, metadata
fetches, symlink reads and user/group name resolution.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager

from dirlist.models.entry import FileMetadata

# Longest path the lister builds, in bytes
PATH_MAX = 4096

# Names every directory enumeration starts with
DOT_ENTRIES: tuple[str, ...] = (".", "..")


class FileSystem(ABC):
    """Abstract base class for the operating system primitives.

    All methods raise ``OSError`` on failure, except the name lookups
    which return None when the id has no database entry.

    Example:
        >>> fs = PosixFileSystem()
        >>> with fs.open_directory("/tmp") as names:
        ...     for name in names:
        ...         print(name, fs.lstat(f"/tmp/{name}").kind)
    """

    @abstractmethod
    def open_directory(self, path: str) -> AbstractContextManager[Iterator[str]]:
        """Open a directory for enumeration.

        The returned context manager releases the directory handle on
        exit. It yields an iterator over child names: '.' and '..'
        first, then the remaining children in the order the operating
        system returns them.

        Args:
            path: Directory to open.

        Raises:
            OSError: If the directory cannot be opened.
        """

    @abstractmethod
    def lstat(self, path: str) -> FileMetadata:
        """Fetch metadata without following a final symlink."""

    @abstractmethod
    def stat(self, path: str) -> FileMetadata:
        """Fetch metadata, following symlinks."""

    @abstractmethod
    def readlink(self, path: str) -> str:
        """Return the target text of a symlink."""

    @abstractmethod
    def user_name(self, uid: int) -> str | None:
        """Look up the account name for a user id."""

    @abstractmethod
    def group_name(self, gid: int) -> str | None:
        """Look up the group name for a group id."""
