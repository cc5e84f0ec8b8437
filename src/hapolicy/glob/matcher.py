"""Hierarchical glob matching for resource identifiers.

A pattern is split into segments on a separator. A segment that is exactly
``**`` matches zero or more whole candidate segments. Any other segment is
matched against one candidate segment, with each ``*`` standing for a run
of zero or more characters inside that segment. Candidates are always
compared literally.

Characters are Python ``str`` units, i.e. Unicode code points.

Usage::

    from hapolicy.glob import compile_pattern, matches

    matches("a/**/*.jpg", "a/foo/bar/baz.jpg", "/")  # True

    pattern = compile_pattern("photos/*/thumbs/**")
    pattern.match("photos/2015/thumbs/small/1.jpg")  # True
"""

from __future__ import annotations

import functools
import logging
import operator
from dataclasses import dataclass
from typing import Sequence

from hapolicy.config import DEFAULT_LIMITS, MatchLimits
from hapolicy.glob.segments import split_segments
from hapolicy.glob.sequence import match_sequence

__all__ = [
    "ANY_SEGMENTS",
    "ANY_CHARS",
    "Segment",
    "GlobPattern",
    "compile_pattern",
    "matches",
    "matches_segments",
    "matches_glob",
]

ANY_SEGMENTS = "**"
ANY_CHARS = "*"

_logger = logging.getLogger("hapolicy.glob")


def matches_glob(pattern: str, candidate: str) -> bool:
    """Match one pattern segment against one literal candidate segment.

    Each ``*`` in ``pattern`` matches a run of zero or more characters. When
    the candidate is exhausted, the rest of the pattern must be empty or
    exactly ``*``.
    """
    return match_sequence(pattern, candidate, _is_any_chars, operator.eq)


def _is_any_chars(char: str) -> bool:
    return char == ANY_CHARS


@dataclass(frozen=True)
class Segment:
    """A classified pattern segment."""

    text: str

    @property
    def is_any_segments(self) -> bool:
        """True when the segment is the ``**`` marker."""
        return self.text == ANY_SEGMENTS

    @property
    def has_wildcard(self) -> bool:
        return ANY_CHARS in self.text

    def accepts(self, candidate: str) -> bool:
        """Match this (non-marker) segment against one candidate segment."""
        if self.has_wildcard:
            return matches_glob(self.text, candidate)
        return self.text == candidate


def _is_any_segments(segment: Segment) -> bool:
    return segment.is_any_segments


def _accepts(segment: Segment, candidate: str) -> bool:
    return segment.accepts(candidate)


def _match_compiled(segments: Sequence[Segment], candidate: Sequence[str]) -> bool:
    return match_sequence(segments, candidate, _is_any_segments, _accepts)


def matches_segments(pattern: Sequence[str], candidate: Sequence[str]) -> bool:
    """Match a sequence of pattern segments against candidate segments.

    ``**`` must be a whole segment to act as the multi-segment marker. A
    candidate that runs out early is accepted only if exactly one ``**``
    segment remains in the pattern.
    """
    return _match_compiled([Segment(text) for text in pattern], candidate)


class GlobPattern:
    """A pattern split and classified once, reusable across candidates.

    Instances are immutable and safe to share between threads.
    """

    __slots__ = ("_pattern", "_separator", "_segments", "_limits")

    def __init__(
        self,
        pattern: str,
        separator: str = "/",
        limits: MatchLimits | None = None,
    ) -> None:
        """Compile a pattern.

        Args:
            pattern: The acceptance pattern.
            separator: Segment delimiter; an empty string disables splitting.
            limits: Input size bounds; the defaults apply when omitted.

        Raises:
            MatchLimitExceededError: If the pattern is longer than allowed.
        """
        self._limits = limits if limits is not None else DEFAULT_LIMITS
        self._limits.check_pattern(pattern)
        self._pattern = pattern
        self._separator = separator
        self._segments: tuple[Segment, ...] = tuple(
            Segment(text) for text in split_segments(pattern, separator)
        )

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def limits(self) -> MatchLimits:
        return self._limits

    def match(self, candidate: str) -> bool:
        """Return True iff the pattern accepts ``candidate``.

        Raises:
            MatchLimitExceededError: If the candidate is longer than allowed.
        """
        self._limits.check_candidate(candidate)
        decision = _match_compiled(
            self._segments, split_segments(candidate, self._separator)
        )
        _logger.debug(
            "Glob match: pattern=%r candidate=%r separator=%r decision=%s",
            self._pattern,
            candidate,
            self._separator,
            decision,
        )
        return decision

    def __repr__(self) -> str:
        return f"GlobPattern({self._pattern!r}, separator={self._separator!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobPattern):
            return NotImplemented
        return (
            self._pattern == other._pattern
            and self._separator == other._separator
            and self._limits == other._limits
        )

    def __hash__(self) -> int:
        return hash((self._pattern, self._separator, self._limits))


@functools.lru_cache(maxsize=256)
def compile_pattern(
    pattern: str,
    separator: str = "/",
    limits: MatchLimits | None = None,
) -> GlobPattern:
    """Compile ``pattern`` into a GlobPattern, reusing recent compilations."""
    return GlobPattern(pattern, separator, limits)


def matches(
    pattern: str,
    candidate: str,
    separator: str,
    limits: MatchLimits | None = None,
) -> bool:
    """Returns True iff ``pattern`` accepts ``candidate``.

    Both strings are split on ``separator`` (an empty separator disables
    splitting). A ``*`` matches any characters within one segment and a
    ``**`` segment matches any number of whole segments, including none.

    Args:
        pattern: The declared acceptance pattern.
        candidate: The concrete identifier being tested.
        separator: Segment delimiter.
        limits: Input size bounds; the defaults apply when omitted.

    Returns:
        True if the candidate is accepted, False otherwise.

    Raises:
        MatchLimitExceededError: If either input is longer than allowed.

    Example:
        >>> matches("a/*", "a/foo", "/")
        True
        >>> matches("*/*", "foo/bar/baz", "/")
        False
    """
    return compile_pattern(pattern, separator, limits).match(candidate)
