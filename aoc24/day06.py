"""A guard patrolling a lab map, turning right at every obstacle."""

from __future__ import annotations

from enum import IntFlag

from aoc24.grid import Grid

OBSTACLE = "#"


class Dir(IntFlag):
    """Heading of the guard; several headings can be combined per cell."""

    U = 0b0001
    D = 0b0010
    L = 0b0100
    R = 0b1000


_DELTAS = {
    Dir.U: (0, -1),
    Dir.D: (0, 1),
    Dir.L: (-1, 0),
    Dir.R: (1, 0),
}

_TURN_RIGHT = {
    Dir.U: Dir.R,
    Dir.R: Dir.D,
    Dir.D: Dir.L,
    Dir.L: Dir.U,
}


class Walker:
    """Follows the guard's route and records the headings seen at each cell."""

    def __init__(self, grid: Grid[str]) -> None:
        self.grid = grid
        self.visited: dict[tuple[int, int], Dir] = {}

    def walk(self, x: int, y: int, direction: Dir) -> tuple[int, bool]:
        """Walk from (x, y); return the visited cell count and whether the guard left the map.

        The second value is False when the guard enters a loop.
        """
        direction = Dir(direction)
        if direction not in _DELTAS:
            raise ValueError(f"not a single heading: {direction!r}")

        while True:
            seen = self.visited.get((x, y), Dir(0))
            if seen & direction:
                return len(self.visited), False
            self.visited[(x, y)] = seen | direction

            dx, dy = _DELTAS[direction]
            nx, ny = x + dx, y + dy
            if not self.grid.in_bounds(nx, ny):
                return len(self.visited), True

            if self.grid.get(nx, ny) == OBSTACLE:
                direction = _TURN_RIGHT[direction]
                continue

            x, y = nx, ny