import pytest

from aoc24.day20 import Solver
from aoc24.grid import Coords, Grid

EXAMPLE = """
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


def parse(text):
    data = []
    width = height = 0
    start = end = Coords(0, 0)
    for line in text.splitlines():
        if not line:
            continue
        for x, ch in enumerate(line):
            if ch == "S":
                start = Coords(x, height)
            elif ch == "E":
                end = Coords(x, height)
        data.extend("." if ch in "SE" else ch for ch in line)
        width = len(line)
        height += 1
    return Grid(width, height, data), start, end


@pytest.fixture
def solver():
    track, start, end = parse(EXAMPLE)
    s = Solver(track)
    s.prepare(start, end)
    return s


@pytest.mark.parametrize("radius, threshold, expected", [(2, 2, 44), (20, 50, 285)])
def test_example(solver, radius, threshold, expected):
    assert solver.count_cheats(radius, threshold) == expected


def test_no_cheat_saves_more_than_the_track(solver):
    assert solver.count_cheats(20, 100) == 0


def test_unprepared_solver_counts_nothing():
    track, _, _ = parse(EXAMPLE)
    assert Solver(track).count_cheats(2, 2) == 0


def test_single_wall_shortcut():
    track, start, end = parse("#####\n#S#E#\n#.#.#\n#...#\n#####\n")
    s = Solver(track)
    s.prepare(start, end)
    assert s.count_cheats(2, 4) == 1
    assert s.count_cheats(2, 5) == 0