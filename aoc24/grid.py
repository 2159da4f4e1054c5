"""A rectangular grid stored row by row, with coordinate helpers."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class Coords(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class WithCoords(Generic[T]):
    """A grid value together with its position."""

    value: T
    coords: Coords

    @property
    def x(self) -> int:
        return self.coords.x

    @property
    def y(self) -> int:
        return self.coords.y


DeltaFunc = Callable[[int, int], list[tuple[int, int]]]


def deltas4(x: int, y: int) -> list[tuple[int, int]]:
    """Orthogonal neighbours: up, right, down, left."""
    return [(x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)]


def deltas8(x: int, y: int) -> list[tuple[int, int]]:
    """All eight neighbours, row by row, skipping the centre."""
    return [
        (x - 1, y - 1), (x, y - 1), (x + 1, y - 1),
        (x - 1, y), (x + 1, y),
        (x - 1, y + 1), (x, y + 1), (x + 1, y + 1),
    ]


class Grid(Generic[T]):
    """A width x height grid of values."""

    def __init__(self, width: int, height: int, items: Iterable[T]) -> None:
        self.width = width
        self.height = height
        self.items: list[T] = list(items)

    def clone(self) -> Grid[T]:
        """Return a copy whose cells are independent of this grid."""
        return Grid(self.width, self.height, (copy.copy(v) for v in self.items))

    def find(self, predicate: Callable[[WithCoords[T]], bool]) -> WithCoords[T] | None:
        """Return the first cell matching the predicate, or None."""
        return next(self.find_all(predicate), None)

    def find_all(self, predicate: Callable[[WithCoords[T]], bool]) -> Iterator[WithCoords[T]]:
        """Yield every cell matching the predicate, in row order."""
        return (item for item in self if predicate(item))

    def _index(self, x: int, y: int) -> int:
        return self.width * y + x

    def in_bounds(self, x: int, y: int) -> bool:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return self._index(x, y) < len(self.items)

    def get(self, x: int, y: int, default: T | None = None) -> T | None:
        """Return the value at (x, y), or default when outside the grid."""
        if not self.in_bounds(x, y):
            return default
        return self.items[self._index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the grid")
        self.items[self._index(x, y)] = value

    def __iter__(self) -> Iterator[WithCoords[T]]:
        for index, value in enumerate(self.items):
            y, x = divmod(index, self.width)
            yield WithCoords(value, Coords(x, y))

    def around(self, x: int, y: int, deltas: DeltaFunc = deltas4) -> Iterator[WithCoords[T]]:
        """Yield the neighbours of (x, y) that lie inside the grid."""
        for nx, ny in deltas(x, y):
            if self.in_bounds(nx, ny):
                yield WithCoords(self.items[self._index(nx, ny)], Coords(nx, ny))

    def render(self, charfunc: Callable[[WithCoords[T]], str]) -> str:
        """Draw the grid as text, one line per row."""
        cells = [charfunc(item) for item in self]
        rows = ("".join(cells[start:start + self.width]) for start in range(0, len(cells), self.width))
        return "".join(row + "\n" for row in rows)