"""Counting the ways towel patterns can make up a design."""

from __future__ import annotations

from collections.abc import Container
from functools import cache


def count_arrangements(design: str, patterns: Container[str]) -> int:
    """Number of ways to write design as a concatenation of patterns."""

    @cache
    def ways(index: int) -> int:
        if index == len(design):
            return 1
        return sum(
            ways(end)
            for end in range(index + 1, len(design) + 1)
            if design[index:end] in patterns
        )

    return ways(0)