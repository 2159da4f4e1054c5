"""Small numeric and collection helpers shared by the puzzle solutions."""

from __future__ import annotations

import re
from collections.abc import Hashable, Iterable
from typing import TypeVar

H = TypeVar("H", bound=Hashable)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def abs_diff(a, b):
    """Return the absolute difference between two numbers."""
    return a - b if a > b else b - a


def must_parse(s: str) -> int:
    """Parse a decimal integer, raising ValueError on anything else."""
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer: {s!r}")
    return int(s)


def num_digits(n: int) -> int:
    """Count the decimal digits of a positive integer; zero and below give 0."""
    count = 0
    while n > 0:
        n //= 10
        count += 1
    return count


def modulo(a: int, b: int) -> int:
    """Modulo whose result takes the sign of the divisor."""
    return a % b


def make_set(items: Iterable[H]) -> set[H]:
    """Collect items into a set."""
    return set(items)


def join_ints(values: Iterable[int]) -> str:
    """Join integers with commas."""
    return ",".join(str(int(v)) for v in values)