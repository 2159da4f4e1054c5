"""Escaping a memory grid that fills with corrupted bytes."""

from __future__ import annotations

from collections import deque

from aoc24.grid import Coords, Grid

WALL = "#"

_DELTAS = ((0, -1), (1, 0), (0, 1), (-1, 0))


class Finder:
    """Path search over a grid where '#' cells are blocked."""

    def __init__(self, grid: Grid[str]) -> None:
        self.grid = grid

    def _neighbours(self, loc: Coords):
        for dx, dy in _DELTAS:
            nxt = Coords(loc.x + dx, loc.y + dy)
            if self.grid.get(nxt.x, nxt.y, WALL) != WALL:
                yield nxt

    def walk(self, start, end, path_exists: bool = False) -> int:
        """Steps from start to end; 0 when end cannot be reached.

        Without path_exists the result is the shortest path length. With it the
        search stops at the first path found, whose length need not be minimal.
        """
        start, end = Coords(*start), Coords(*end)
        seen = {start}

        if path_exists:
            stack = [(start, 0)]
            while stack:
                loc, steps = stack.pop()
                if loc == end:
                    return steps
                for nxt in self._neighbours(loc):
                    if nxt not in seen:
                        seen.add(nxt)
                        stack.append((nxt, steps + 1))
            return 0

        queue = deque([(start, 0)])
        while queue:
            loc, steps = queue.popleft()
            if loc == end:
                return steps
            for nxt in self._neighbours(loc):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append((nxt, steps + 1))
        return 0