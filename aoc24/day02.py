"""Checking reactor reports for safe level changes."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from itertools import pairwise

from aoc24.nums import abs_diff

SAFE_DIFF_MIN = 1
SAFE_DIFF_MAX = 3


def _safe_diff(a: int, b: int) -> bool:
    return SAFE_DIFF_MIN <= abs_diff(a, b) <= SAFE_DIFF_MAX


def pluck(levels: Sequence[int], index: int) -> list[int]:
    """Return a copy of levels without the element at index."""
    if not 0 <= index < len(levels):
        raise IndexError(f"index {index} out of range")
    return [*levels[:index], *levels[index + 1:]]


def is_safe_damped(levels: Sequence[int], errors: int) -> bool:
    """Whether the report is safe after removing at most `errors` levels."""
    if errors < 0:
        return False

    ordered = operator.lt if levels[0] < levels[1] else operator.gt

    for k, (a, b) in enumerate(pairwise(levels), start=1):
        if not ordered(a, b):
            return any(
                is_safe_damped(pluck(levels, pos), errors - 1)
                for pos in (k - 2, k - 1, k)
                if pos >= 0
            )
        if not _safe_diff(a, b):
            return is_safe_damped(pluck(levels, k - 1), errors - 1) or is_safe_damped(
                pluck(levels, k), errors - 1
            )

    return True