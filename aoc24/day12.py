"""Garden regions: area, perimeter and number of straight sides."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

from aoc24.grid import Coords, Grid, WithCoords, deltas4


@dataclass
class Plot:
    kind: str
    visited: bool = False


class WallDir(IntEnum):
    HRZ = 1
    VRT = 2


class Side(IntEnum):
    """Which side of the wall the region lies on."""

    FROM_LEFT = 1
    FROM_RIGHT = 2
    FROM_ABOVE = 3
    FROM_BELOW = 4


@dataclass(frozen=True)
class Wall:
    """A unit fence segment: horizontal on a cell's top edge, vertical on its left edge."""

    direction: WallDir
    coords: Coords


def _cell_walls(c: Coords) -> dict[Wall, Side]:
    return {
        Wall(WallDir.HRZ, c): Side.FROM_BELOW,
        Wall(WallDir.VRT, c): Side.FROM_RIGHT,
        Wall(WallDir.HRZ, Coords(c.x, c.y + 1)): Side.FROM_ABOVE,
        Wall(WallDir.VRT, Coords(c.x + 1, c.y)): Side.FROM_LEFT,
    }


def _shared_wall(curr: Coords, nxt: Coords) -> Wall:
    if nxt.x > curr.x:
        return Wall(WallDir.VRT, nxt)
    if nxt.x < curr.x:
        return Wall(WallDir.VRT, curr)
    if nxt.y > curr.y:
        return Wall(WallDir.HRZ, nxt)
    if nxt.y < curr.y:
        return Wall(WallDir.HRZ, curr)
    raise ValueError("cells coincide")


def flood_fill(pos: WithCoords[Plot], grid: Grid[Plot]) -> tuple[int, dict[Wall, Side]]:
    """Return the area and fence of the region containing pos; marks its cells visited."""
    kind = pos.value.kind
    grid.set(pos.x, pos.y, replace(pos.value, visited=True))
    stack = [pos.coords]
    area = 0
    perimeter: dict[Wall, Side] = {}

    while stack:
        here = stack.pop()
        area += 1
        own = _cell_walls(here)
        for nxt in grid.around(here.x, here.y, deltas4):
            if nxt.value.kind != kind:
                continue
            own.pop(_shared_wall(here, nxt.coords), None)
            if not nxt.value.visited:
                grid.set(nxt.x, nxt.y, replace(nxt.value, visited=True))
                stack.append(nxt.coords)
        perimeter.update(own)

    return area, perimeter


def calc_total_perimeter(grid: Grid[Plot]) -> int:
    """Sum of area times perimeter length over all regions."""
    total = 0
    for cell in grid:
        if cell.value.visited:
            continue
        area, perimeter = flood_fill(cell, grid)
        total += area * len(perimeter)
    return total


_ALONG = {
    WallDir.HRZ: ((-1, 0), (1, 0)),
    WallDir.VRT: ((0, -1), (0, 1)),
}


def _count_sides(perimeter: dict[Wall, Side]) -> int:
    remaining = dict(perimeter)
    count = 0
    while remaining:
        wall, side = remaining.popitem()
        count += 1
        for dx, dy in _ALONG[wall.direction]:
            x, y = wall.coords
            while True:
                x += dx
                y += dy
                neighbour = Wall(wall.direction, Coords(x, y))
                if remaining.get(neighbour) != side:
                    break
                del remaining[neighbour]
    return count


def calc_total_walls(grid: Grid[Plot]) -> int:
    """Sum of area times number of straight sides over all regions."""
    total = 0
    for cell in grid:
        if cell.value.visited:
            continue
        area, perimeter = flood_fill(cell, grid)
        total += area * _count_sides(perimeter)
    return total