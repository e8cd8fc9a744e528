"""Unit tests for listing control models.

Tests for HiddenPolicy filtering and PendingDirectory validation.
"""

import pytest
from dirlist.models.listing import HiddenPolicy, PendingDirectory, is_dot_entry

NAMES = [".", "..", ".b", "..c", "...", "a", "a.b"]


class TestHiddenPolicy:
    """Tests for HiddenPolicy.hides."""

    def test_default_hides_all_dot_names(self) -> None:
        shown = [n for n in NAMES if not HiddenPolicy.DEFAULT.hides(n)]
        assert shown == ["a", "a.b"]

    def test_almost_hides_only_dot_entries(self) -> None:
        shown = [n for n in NAMES if not HiddenPolicy.ALMOST.hides(n)]
        assert shown == [".b", "..c", "...", "a", "a.b"]

    def test_all_hides_nothing(self) -> None:
        assert not any(HiddenPolicy.ALL.hides(n) for n in NAMES)

    def test_policies_are_nested(self) -> None:
        """Every name shown under DEFAULT is shown under ALMOST, and so on."""
        default = {n for n in NAMES if not HiddenPolicy.DEFAULT.hides(n)}
        almost = {n for n in NAMES if not HiddenPolicy.ALMOST.hides(n)}
        every = {n for n in NAMES if not HiddenPolicy.ALL.hides(n)}
        assert default <= almost <= every

    def test_dot_entries_only_under_all(self) -> None:
        for policy in HiddenPolicy:
            visible = not policy.hides(".") and not policy.hides("..")
            assert visible is (policy is HiddenPolicy.ALL)


class TestIsDotEntry:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [(".", True), ("..", True), ("...", False), (".a", False)],
    )
    def test_is_dot_entry(self, name: str, expected: bool) -> None:
        assert is_dot_entry(name) is expected


class TestPendingDirectory:
    """Tests for PendingDirectory validation."""

    def test_defaults_to_root_depth(self) -> None:
        assert PendingDirectory(path="./").depth == 0

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="Path cannot be empty"):
            PendingDirectory(path="")

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            PendingDirectory(path="x", depth=-1)
