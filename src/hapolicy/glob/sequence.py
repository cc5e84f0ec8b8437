"""Tabulated wildcard matching over arbitrary sequences of units."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

__all__ = ["match_sequence"]

P = TypeVar("P")
C = TypeVar("C")


def match_sequence(
    pattern: Sequence[P],
    candidate: Sequence[C],
    is_any_run: Callable[[P], bool],
    unit_matches: Callable[[P, C], bool],
) -> bool:
    """Decide whether ``pattern`` accepts ``candidate``.

    A pattern unit for which ``is_any_run`` is true absorbs zero or more
    candidate units. Any other pattern unit must accept exactly one
    candidate unit through ``unit_matches``. When the candidate runs out,
    the pattern is accepted only if nothing is left or exactly one
    any-run unit is left.

    The table cell ``(i, j)`` answers whether ``pattern[i:]`` accepts
    ``candidate[j:]``. Rows are filled from the end of the pattern backwards
    and only the row below the current one is kept, so the cost is
    O(len(pattern) * len(candidate)) time and O(len(candidate)) memory,
    with no recursion.

    Args:
        pattern: The pattern units.
        candidate: The candidate units, compared literally.
        is_any_run: Whether a pattern unit is the any-run wildcard.
        unit_matches: Whether a non-wildcard pattern unit accepts a
            candidate unit.

    Returns:
        True if the candidate is accepted, False otherwise.
    """
    p_len = len(pattern)
    c_len = len(candidate)

    # Exhausted pattern: only an exhausted candidate is accepted.
    below = [False] * c_len + [True]

    for i in range(p_len - 1, -1, -1):
        unit = pattern[i]
        any_run = is_any_run(unit)
        row = [False] * (c_len + 1)
        row[c_len] = any_run and i == p_len - 1

        if any_run:
            for j in range(c_len - 1, -1, -1):
                # Stop absorbing here, or absorb candidate[j] and keep going.
                row[j] = below[j] or row[j + 1]
        else:
            for j in range(c_len - 1, -1, -1):
                row[j] = below[j + 1] and unit_matches(unit, candidate[j])

        below = row

    return below[0]
