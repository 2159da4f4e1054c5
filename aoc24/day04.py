"""Word search in a letter grid."""

from __future__ import annotations

from collections.abc import Sequence

from aoc24.grid import Grid

DIRECTIONS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]

_CROSS = list("MMSS")


def find_words_dir(grid: Grid[str], x: int, y: int, word: Sequence[str]) -> int:
    """Count straight-line occurrences of word starting at (x, y)."""
    if grid.get(x, y) != word[0]:
        return 0
    return sum(
        all(grid.get(x + dx * step, y + dy * step) == expected for step, expected in enumerate(word[1:], start=1))
        for dx, dy in DIRECTIONS
    )


def search_dir(grid: Grid[str], word: Sequence[str]) -> int:
    """Count every occurrence of word in any of the eight directions."""
    return sum(find_words_dir(grid, cell.x, cell.y, word) for cell in grid)


def _check_xmas(grid: Grid[str], x: int, y: int) -> bool:
    if grid.get(x, y) != "A":
        return False
    corners = [grid.get(x - 1, y - 1), grid.get(x + 1, y - 1), grid.get(x + 1, y + 1), grid.get(x - 1, y + 1)]
    return any(corners[k:] + corners[:k] == _CROSS for k in range(len(corners)))


def search_xmas(grid: Grid[str]) -> int:
    """Count the crossed MAS patterns centred on an A."""
    return sum(_check_xmas(grid, cell.x, cell.y) for cell in grid)