"""Cheapest routes through a reindeer maze, where turning costs extra."""

from __future__ import annotations

from enum import IntEnum

from aoc24.grid import Coords, Grid

WALL = "#"


class Dir(IntEnum):
    N = 0
    E = 1
    S = 2
    W = 3


_STEPS = (
    (0, -1, Dir.N),
    (1, 0, Dir.E),
    (0, 1, Dir.S),
    (-1, 0, Dir.W),
)


def _step_cost(prev: Dir, nxt: Dir) -> int:
    if prev == nxt:
        return 1
    # Only N->S and E->W are priced as full reversals.
    if prev + 2 == nxt:
        return 2001
    return 1001


class MazeRunner:
    """Finds the lowest score from start to end and the tiles on every best path."""

    def __init__(self, maze: Grid[str], start, end) -> None:
        self.maze = maze
        self.start = Coords(*start)
        self.end = Coords(*end)
        self._visited: dict[Coords, int] = {}
        self._affected: set[Coords] = set()
        self._cost = 0

    def run(self) -> int:
        """Search the maze starting east-facing; return the lowest score."""
        self._cost = 0
        self._affected.clear()
        self._visited = {self.start: 0}
        self._explore(self.start, Dir.E, 0, [self.start])
        return self._cost

    def _explore(self, loc: Coords, heading: Dir, cost: int, path: list[Coords]) -> None:
        if loc == self.end:
            if self._cost == 0 or cost <= self._cost:
                if cost < self._cost:
                    self._affected.clear()
                self._affected.update(path)
                self._cost = cost
            return

        prev = self._visited.get(loc, 0)
        if prev > 0 and cost > prev + 1000:
            return
        self._visited[loc] = cost

        for dx, dy, direction in _STEPS:
            nxt = Coords(loc.x + dx, loc.y + dy)
            if self.maze.get(nxt.x, nxt.y, WALL) == WALL:
                continue
            path.append(nxt)
            self._explore(nxt, direction, cost + _step_cost(heading, direction), path)
            path.pop()

    def affected_count(self) -> int:
        """Number of tiles on at least one best path, after run()."""
        return len(self._affected)