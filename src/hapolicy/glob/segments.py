"""Segment splitting for patterns and candidates."""

from __future__ import annotations

__all__ = ["split_segments"]


def split_segments(value: str, separator: str) -> list[str]:
    """Split a pattern or candidate into its ordered segments.

    An empty separator disables splitting and the whole value becomes a
    single segment. Otherwise every occurrence of the separator splits,
    and empty segments from leading, trailing or doubled separators are
    kept. The empty string always yields ``[""]``.
    """
    if not separator:
        return [value]
    return value.split(separator)
