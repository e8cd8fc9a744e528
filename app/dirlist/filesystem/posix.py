"""POSIX implementation of the FileSystem interface.

Uses ``os.scandir`` for enumeration and the ``pwd``/``grp`` databases
for name resolution.
"""

import grp
import os
import pwd
from collections.abc import Iterator
from contextlib import contextmanager

from dirlist.filesystem.base import DOT_ENTRIES, FileSystem
from dirlist.models.entry import FileMetadata


class PosixFileSystem(FileSystem):
    """FileSystem backed by the running operating system."""

    @contextmanager
    def open_directory(self, path: str) -> Iterator[Iterator[str]]:
        with os.scandir(path) as entries:
            yield self._names(entries)

    @staticmethod
    def _names(entries: Iterator[os.DirEntry[str]]) -> Iterator[str]:
        # scandir omits the dot entries, readdir does not
        yield from DOT_ENTRIES
        for entry in entries:
            yield entry.name

    def lstat(self, path: str) -> FileMetadata:
        return FileMetadata.from_stat(os.lstat(path))

    def stat(self, path: str) -> FileMetadata:
        return FileMetadata.from_stat(os.stat(path))

    def readlink(self, path: str) -> str:
        return os.readlink(path)

    def user_name(self, uid: int) -> str | None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    def group_name(self, gid: int) -> str | None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None
