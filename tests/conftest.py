"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules, most
notably an in-memory FileSystem whose enumeration order is fixed by
the order entries are added.
"""

from pathlib import Path

import pytest
from dirlist.core.config import ListingConfig
from fakes import NOW, FakeFileSystem


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Empty in-memory filesystem with a root directory '/r'."""
    fs = FakeFileSystem()
    fs.add_dir("/r")
    return fs


@pytest.fixture
def make_config():
    """Factory for ListingConfig pinned to a fixed clock."""

    def _make(**options: object) -> ListingConfig:
        return ListingConfig.create(now=NOW, **options)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Real directory with a file, a hidden file and an empty subdirectory."""
    (tmp_path / "a").write_text("hello\n")
    (tmp_path / "a").chmod(0o644)
    (tmp_path / ".b").write_text("")
    (tmp_path / "c").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def isolated_config_home(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("config-home")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home
