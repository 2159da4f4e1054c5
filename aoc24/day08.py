"""Antenna antinodes on a bounded map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import combinations, count

from aoc24.nums import abs_diff

Point = tuple[int, int]


def permute(items: Iterable[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield every unordered pair of items, in input order."""
    yield from combinations(items, 2)


def mirrors(a: Sequence[int], b: Sequence[int]) -> tuple[Point, Point]:
    """The two points one step beyond a and b along the line through them."""
    if a[0] > b[0]:
        a, b = b, a

    dx = abs_diff(a[0], b[0])
    dy = abs_diff(a[1], b[1])
    x_min = min(a[0], b[0]) - dx
    x_max = max(a[0], b[0]) + dx
    y_min = min(a[1], b[1]) - dy
    y_max = max(a[1], b[1]) + dy

    if a[1] < b[1]:
        return (x_min, y_min), (x_max, y_max)
    return (x_min, y_max), (x_max, y_min)


def propagate_signal(a: Sequence[int], b: Sequence[int], steps: int, width: int, height: int) -> Iterator[Point]:
    """Yield antinodes of a and b inside a width x height map.

    A negative step count means unlimited steps, with a and b themselves included.
    """
    if a[0] > b[0]:
        a, b = b, a

    resonant = steps < 0
    dx = b[0] - a[0]
    dy = b[1] - a[1]

    if resonant:
        yield tuple(a)
        yield tuple(b)

    for (x, y), sx, sy in ((b, dx, dy), (a, -dx, -dy)):
        for _ in count() if resonant else range(steps):
            x += sx
            y += sy
            if not (0 <= x < width and 0 <= y < height):
                break
            yield (x, y)