"""Tests for segment splitting."""

from __future__ import annotations

from hapolicy.glob.segments import split_segments


class TestSplitSegments:
    """Tests for split_segments()."""

    def test_splits_on_every_separator(self) -> None:
        assert split_segments("a/b/c", "/") == ["a", "b", "c"]

    def test_multi_character_separator(self) -> None:
        assert split_segments("a::b::c", "::") == ["a", "b", "c"]

    def test_empty_separator_disables_splitting(self) -> None:
        """An empty separator returns the whole value as a single segment."""
        assert split_segments("a/b/c", "") == ["a/b/c"]

    def test_empty_separator_keeps_empty_value(self) -> None:
        assert split_segments("", "") == [""]

    def test_empty_value_yields_single_empty_segment(self) -> None:
        assert split_segments("", "/") == [""]

    def test_preserves_empty_segments(self) -> None:
        """Leading, trailing, and doubled separators produce empty segments."""
        assert split_segments("/a", "/") == ["", "a"]
        assert split_segments("a/", "/") == ["a", ""]
        assert split_segments("a//b", "/") == ["a", "", "b"]

    def test_value_without_separator(self) -> None:
        assert split_segments("abc", "/") == ["abc"]

    def test_wildcards_are_not_special(self) -> None:
        assert split_segments("a/**/*.jpg", "/") == ["a", "**", "*.jpg"]
