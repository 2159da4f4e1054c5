"""Hiking trails that climb one height step at a time."""

from __future__ import annotations

from dataclasses import dataclass, replace

from aoc24.grid import Coords, Grid, WithCoords, deltas4

PEAK = 9


@dataclass
class TrailPos:
    height: int
    visited: bool = False


def walk_trail(pos: WithCoords[TrailPos], grid: Grid[TrailPos]) -> set[Coords]:
    """Return the peaks reachable from pos; marks cells of grid as visited."""
    peaks: set[Coords] = set()

    def visit(here: WithCoords[TrailPos]) -> None:
        grid.set(here.x, here.y, replace(here.value, visited=True))
        if here.value.height == PEAK:
            peaks.add(here.coords)
        for nxt in grid.around(here.x, here.y, deltas4):
            if nxt.value.visited or nxt.value.height - here.value.height != 1:
                continue
            visit(nxt)

    visit(pos)
    return peaks


def trail_rating(head: WithCoords[TrailPos], tail: Coords, grid: Grid[TrailPos]) -> int:
    """Count distinct climbing paths from head to the cell at tail."""

    def rate(here: WithCoords[TrailPos], seen: frozenset[Coords]) -> int:
        if here.coords == tail:
            return 1
        seen = seen | {here.coords}
        return sum(
            rate(nxt, seen)
            for nxt in grid.around(here.x, here.y, deltas4)
            if nxt.coords not in seen and nxt.value.height - here.value.height == 1
        )

    return rate(head, frozenset())