"""Reading puzzle input as lines, numbers and grids."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _lines(source: str | Iterable[str]) -> Iterable[str]:
    if isinstance(source, str):
        lines = source.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines
    return (line.removesuffix("\n") for line in source)


def read_input(source: str | Iterable[str], parse: Callable[[str], T]) -> Iterator[T]:
    """Yield parse(line) for each line of text or of an open text file."""
    for line in _lines(source):
        yield parse(line.removesuffix("\r"))


def nums_line(s: str) -> list[int]:
    """Split a line on whitespace into integers; unparsable fields become 0."""
    return [int(field) if _INT_RE.fullmatch(field) else 0 for field in s.split()]


def read_grid(source: str | Iterable[str], make_value: Callable[[str], T]) -> tuple[int, int, list[T]]:
    """Read non-empty lines into (width, height, cells) for a Grid."""
    data: list[T] = []
    height = 0
    for line in _lines(source):
        if not line:
            continue
        data.extend(make_value(ch) for ch in line)
        height += 1
    if height == 0:
        raise ValueError("grid input has no rows")
    return len(data) // height, height, data