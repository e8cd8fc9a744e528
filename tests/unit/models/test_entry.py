"""Unit tests for entry models.

Tests for FileKind classification, FileMetadata and DirEntry.
"""

import os
import stat
from pathlib import Path

import pytest
from dirlist.models.entry import DirEntry, FileKind, FileMetadata


class TestFileKind:
    """Tests for FileKind classification."""

    @pytest.mark.parametrize(
        ("fmt", "kind", "glyph"),
        [
            (stat.S_IFBLK, FileKind.BLOCK, "b"),
            (stat.S_IFCHR, FileKind.CHAR, "c"),
            (stat.S_IFDIR, FileKind.DIRECTORY, "d"),
            (stat.S_IFREG, FileKind.REGULAR, "-"),
            (stat.S_IFIFO, FileKind.FIFO, "p"),
            (stat.S_IFLNK, FileKind.SYMLINK, "l"),
            (stat.S_IFSOCK, FileKind.SOCKET, "s"),
        ],
    )
    def test_from_mode(self, fmt: int, kind: FileKind, glyph: str) -> None:
        """Each type bit pattern maps to one kind and one glyph."""
        assert FileKind.from_mode(fmt | 0o755) is kind
        assert kind.glyph == glyph

    def test_unknown_type(self) -> None:
        """Mode without recognised type bits is UNKNOWN."""
        assert FileKind.from_mode(0o644) is FileKind.UNKNOWN
        assert FileKind.UNKNOWN.glyph == "?"

    def test_glyphs_are_unique(self) -> None:
        """No two kinds share a glyph."""
        glyphs = [kind.glyph for kind in FileKind]
        assert len(glyphs) == len(set(glyphs))


class TestFileMetadata:
    """Tests for FileMetadata."""

    def test_from_stat(self, tmp_path: Path) -> None:
        """from_stat copies the relevant stat fields."""
        target = tmp_path / "file"
        target.write_text("12345")
        result = os.lstat(target)

        metadata = FileMetadata.from_stat(result)

        assert metadata.mode == result.st_mode
        assert metadata.size == 5
        assert metadata.nlink == result.st_nlink
        assert metadata.uid == result.st_uid
        assert metadata.mtime == int(result.st_mtime)
        assert metadata.kind is FileKind.REGULAR

    def test_device_numbers(self) -> None:
        """rdev is split into major and minor numbers."""
        metadata = FileMetadata(mode=stat.S_IFBLK | 0o660, rdev=os.makedev(8, 1))
        assert metadata.is_device
        assert metadata.rdev_major == 8
        assert metadata.rdev_minor == 1

    def test_regular_file_is_not_device(self) -> None:
        assert not FileMetadata(mode=stat.S_IFREG | 0o644).is_device

    def test_frozen(self) -> None:
        """FileMetadata is immutable."""
        metadata = FileMetadata(mode=stat.S_IFREG)
        with pytest.raises(AttributeError):
            metadata.size = 10  # type: ignore[misc]


class TestDirEntry:
    """Tests for DirEntry."""

    def test_defaults(self) -> None:
        """A plain entry has no link information and resolves fine."""
        entry = DirEntry(name="a", metadata=FileMetadata(mode=stat.S_IFREG | 0o644))
        assert entry.link_target is None
        assert entry.target_metadata is None
        assert entry.link_ok is True
        assert entry.kind is FileKind.REGULAR
