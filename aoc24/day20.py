"""Race track shortcuts through walls."""

from __future__ import annotations

from collections import deque

from aoc24.grid import Coords, Grid
from aoc24.nums import abs_diff

WALL = "#"

_DELTAS = ((1, 0), (0, 1), (-1, 0), (0, -1))


class Solver:
    """Measures track distances from the start and counts time-saving cheats."""

    def __init__(self, track: Grid[str]) -> None:
        self.track = track
        self._cells: list[tuple[int, Coords]] = []

    def prepare(self, start, end) -> None:
        """Record the distance from start of every reachable track cell; the end is not passed through."""
        start, end = Coords(*start), Coords(*end)
        distances = {start: 0}
        queue = deque([start])
        while queue:
            loc = queue.popleft()
            if loc == end:
                continue
            for dx, dy in _DELTAS:
                nxt = Coords(loc.x + dx, loc.y + dy)
                if nxt in distances or self.track.get(nxt.x, nxt.y, WALL) == WALL:
                    continue
                distances[nxt] = distances[loc] + 1
                queue.append(nxt)

        self._cells = sorted(
            ((dist, coords) for coords, dist in distances.items()),
            key=lambda item: (item[1].y, item[1].x),
        )

    def count_cheats(self, radius: int, threshold: int) -> int:
        """Count cheats of at most radius steps that save at least threshold steps."""
        total = 0
        for tile_dist, tile in self._cells:
            for target_dist, target in self._cells:
                if tile_dist < target_dist:
                    continue
                dist = abs_diff(target.x, tile.x) + abs_diff(target.y, tile.y)
                if radius < dist:
                    continue
                if tile_dist - target_dist - dist >= threshold:
                    total += 1
        return total