"""Unit tests for PosixFileSystem against a real temporary directory."""

import grp
import os
import pwd
from pathlib import Path
from unittest.mock import patch

import pytest
from dirlist.filesystem.posix import PosixFileSystem
from dirlist.models.entry import FileKind


@pytest.fixture
def fs() -> PosixFileSystem:
    return PosixFileSystem()


class TestOpenDirectory:
    """Tests for directory enumeration."""

    def test_dot_entries_first(self, fs: PosixFileSystem, sample_tree: Path) -> None:
        with fs.open_directory(str(sample_tree)) as names:
            listed = list(names)

        assert listed[:2] == [".", ".."]
        assert sorted(listed[2:]) == [".b", "a", "c"]

    def test_missing_directory(self, fs: PosixFileSystem, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError), fs.open_directory(str(tmp_path / "nope")):
            pass

    def test_not_a_directory(self, fs: PosixFileSystem, sample_tree: Path) -> None:
        with pytest.raises(NotADirectoryError), fs.open_directory(str(sample_tree / "a")):
            pass


class TestMetadata:
    """Tests for lstat/stat/readlink."""

    def test_lstat_does_not_follow(self, fs: PosixFileSystem, sample_tree: Path) -> None:
        (sample_tree / "link").symlink_to("c")

        assert fs.lstat(str(sample_tree / "link")).kind is FileKind.SYMLINK
        assert fs.stat(str(sample_tree / "link")).kind is FileKind.DIRECTORY
        assert fs.readlink(str(sample_tree / "link")) == "c"

    def test_broken_link(self, fs: PosixFileSystem, tmp_path: Path) -> None:
        (tmp_path / "dangling").symlink_to("missing")

        assert fs.lstat(str(tmp_path / "dangling")).kind is FileKind.SYMLINK
        with pytest.raises(FileNotFoundError):
            fs.stat(str(tmp_path / "dangling"))

    def test_readlink_on_regular_file(self, fs: PosixFileSystem, sample_tree: Path) -> None:
        with pytest.raises(OSError):
            fs.readlink(str(sample_tree / "a"))

    def test_regular_file_metadata(self, fs: PosixFileSystem, sample_tree: Path) -> None:
        metadata = fs.lstat(str(sample_tree / "a"))
        assert metadata.kind is FileKind.REGULAR
        assert metadata.size == len("hello\n")
        assert metadata.uid == os.getuid()


class TestNameLookup:
    """Tests for user/group resolution."""

    def test_current_user(self, fs: PosixFileSystem) -> None:
        try:
            expected = pwd.getpwuid(os.getuid()).pw_name
        except KeyError:
            pytest.skip("current uid has no passwd entry")
        assert fs.user_name(os.getuid()) == expected

    def test_current_group(self, fs: PosixFileSystem) -> None:
        try:
            expected = grp.getgrgid(os.getgid()).gr_name
        except KeyError:
            pytest.skip("current gid has no group entry")
        assert fs.group_name(os.getgid()) == expected

    def test_unknown_user(self, fs: PosixFileSystem) -> None:
        with patch("dirlist.filesystem.posix.pwd.getpwuid", side_effect=KeyError(99999)):
            assert fs.user_name(99999) is None

    def test_unknown_group(self, fs: PosixFileSystem) -> None:
        with patch("dirlist.filesystem.posix.grp.getgrgid", side_effect=KeyError(99999)):
            assert fs.group_name(99999) is None
