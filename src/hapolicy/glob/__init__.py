"""hapolicy glob matching.

Usage::

    from hapolicy.glob import matches

    matches("ht:myapp:*", "ht:myapp:photos", ":")
"""

from __future__ import annotations

from hapolicy.glob.matcher import (
    ANY_CHARS,
    ANY_SEGMENTS,
    GlobPattern,
    Segment,
    compile_pattern,
    matches,
    matches_glob,
    matches_segments,
)
from hapolicy.glob.segments import split_segments
from hapolicy.glob.sequence import match_sequence

__all__ = [
    "ANY_CHARS",
    "ANY_SEGMENTS",
    "GlobPattern",
    "Segment",
    "compile_pattern",
    "match_sequence",
    "matches",
    "matches_glob",
    "matches_segments",
    "split_segments",
]
