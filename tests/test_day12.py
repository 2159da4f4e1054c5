import pytest

from aoc24.day12 import (
    Plot,
    Side,
    Wall,
    WallDir,
    calc_total_perimeter,
    calc_total_walls,
    flood_fill,
)
from aoc24.grid import Coords, Grid
from aoc24.inputs import read_grid

EXAMPLE = """
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""

EXAMPLE2 = """
AAAAAA
AAABBA
AAABBA
ABBAAA
ABBAAA
AAAAAA"""

SMALL = """
AAAA
BBCD
BBCC
EEEC"""

NESTED = """
OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""


def _grid(text):
    return Grid(*read_grid(text, Plot))


def test_example_perimeter():
    assert calc_total_perimeter(_grid(EXAMPLE)) == 1930


def test_example2_walls():
    assert calc_total_walls(_grid(EXAMPLE2)) == 368


@pytest.mark.parametrize(
    ("text", "perimeter", "walls"),
    [(SMALL, 140, 80), (NESTED, 772, 436), (EXAMPLE, 1930, 1206)],
)
def test_known_totals(text, perimeter, walls):
    assert calc_total_perimeter(_grid(text)) == perimeter
    assert calc_total_walls(_grid(text)) == walls


def test_flood_fill_single_cell():
    grid = _grid("A\n")
    area, perimeter = flood_fill(next(iter(grid)), grid)
    assert area == 1
    assert perimeter == {
        Wall(WallDir.HRZ, Coords(0, 0)): Side.FROM_BELOW,
        Wall(WallDir.VRT, Coords(0, 0)): Side.FROM_RIGHT,
        Wall(WallDir.HRZ, Coords(0, 1)): Side.FROM_ABOVE,
        Wall(WallDir.VRT, Coords(1, 0)): Side.FROM_LEFT,
    }


def test_flood_fill_region_marks_visited():
    grid = _grid(SMALL)
    area, perimeter = flood_fill(grid.find(lambda c: c.value.kind == "B"), grid)
    assert area == 4
    assert len(perimeter) == 8
    visited = {cell.coords for cell in grid if cell.value.visited}
    assert visited == {Coords(0, 1), Coords(1, 1), Coords(0, 2), Coords(1, 2)}