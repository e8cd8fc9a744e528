"""Domain models for directory listing.

This module defines the data structures describing a single filesystem
entry: its type tag, its raw metadata, and the listed entry record
including symlink resolution results.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    """Type of a filesystem entry, derived from its mode bits.

    Attributes:
        BLOCK: Block special device.
        CHAR: Character special device.
        DIRECTORY: Directory.
        REGULAR: Regular file.
        FIFO: Named pipe.
        SYMLINK: Symbolic link (as seen without following it).
        SOCKET: Unix domain socket.
        UNKNOWN: Anything else.
    """

    BLOCK = "block"
    CHAR = "char"
    DIRECTORY = "directory"
    REGULAR = "regular"
    FIFO = "fifo"
    SYMLINK = "symlink"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> FileKind:
        """Classify a raw ``st_mode`` value.

        Args:
            mode: Mode bits as returned by stat/lstat.

        Returns:
            The matching FileKind, UNKNOWN if the type bits are unrecognised.
        """
        return _KIND_BY_FORMAT.get(stat.S_IFMT(mode), cls.UNKNOWN)

    @property
    def glyph(self) -> str:
        """Type character shown in the first column of a permission string."""
        return _GLYPHS[self]


_KIND_BY_FORMAT: dict[int, FileKind] = {
    stat.S_IFBLK: FileKind.BLOCK,
    stat.S_IFCHR: FileKind.CHAR,
    stat.S_IFDIR: FileKind.DIRECTORY,
    stat.S_IFREG: FileKind.REGULAR,
    stat.S_IFIFO: FileKind.FIFO,
    stat.S_IFLNK: FileKind.SYMLINK,
    stat.S_IFSOCK: FileKind.SOCKET,
}

_GLYPHS: dict[FileKind, str] = {
    FileKind.BLOCK: "b",
    FileKind.CHAR: "c",
    FileKind.DIRECTORY: "d",
    FileKind.REGULAR: "-",
    FileKind.FIFO: "p",
    FileKind.SYMLINK: "l",
    FileKind.SOCKET: "s",
    FileKind.UNKNOWN: "?",
}

# Any of the three execute bits
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Raw metadata of a filesystem entry.

    Attributes:
        mode: Type and permission bits.
        nlink: Hard link count.
        uid: Owner user id.
        gid: Owner group id.
        size: Size in bytes.
        mtime: Modification time in whole seconds since the epoch.
        rdev: Device number for character and block special files.
    """

    mode: int
    nlink: int = 1
    uid: int = 0
    gid: int = 0
    size: int = 0
    mtime: int = 0
    rdev: int = 0

    @classmethod
    def from_stat(cls, result: os.stat_result) -> FileMetadata:
        """Build metadata from an ``os.stat_result``."""
        return cls(
            mode=result.st_mode,
            nlink=result.st_nlink,
            uid=result.st_uid,
            gid=result.st_gid,
            size=result.st_size,
            mtime=int(result.st_mtime),
            rdev=getattr(result, "st_rdev", 0),
        )

    @property
    def kind(self) -> FileKind:
        return FileKind.from_mode(self.mode)

    @property
    def is_device(self) -> bool:
        """True for character and block special files."""
        return self.kind in (FileKind.CHAR, FileKind.BLOCK)

    @property
    def rdev_major(self) -> int:
        return os.major(self.rdev)

    @property
    def rdev_minor(self) -> int:
        return os.minor(self.rdev)


@dataclass(frozen=True, slots=True)
class DirEntry:
    """One listed child of a directory.

    Symlink fields are only populated when the entry itself is a symlink.

    Attributes:
        name: Child name as enumerated.
        metadata: Metadata of the entry itself (symlinks not followed).
        link_target: Text of the symlink target, None if not a symlink
            or the target could not be read.
        target_metadata: Metadata of the resolved target, None if the
            entry is not a symlink or the target does not resolve.
        link_ok: False only for symlinks whose target does not resolve.
    """

    name: str
    metadata: FileMetadata
    link_target: str | None = None
    target_metadata: FileMetadata | None = None
    link_ok: bool = True

    @property
    def kind(self) -> FileKind:
        return self.metadata.kind
