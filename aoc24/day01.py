"""Comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from aoc24.nums import abs_diff


def diff_lists(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    return sum(abs_diff(a, b) for a, b in zip(sorted(left), sorted(right), strict=True))


def diff_map(left: Sequence[int], right: Sequence[int]) -> int:
    """Similarity score: each left value times its count in the right list."""
    counts = Counter(right)
    return sum(n * counts[n] for n in left)