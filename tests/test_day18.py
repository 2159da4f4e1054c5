from aoc24.day18 import Finder
from aoc24.grid import Coords, Grid

EXAMPLE = """
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def parse(text):
    coords = []
    for line in text.splitlines():
        if not line:
            continue
        left, _, right = line.partition(",")
        coords.append(Coords(int(left), int(right)))
    return coords


def example_grid(count):
    grid = Grid(7, 7, ["."] * 49)
    for c in parse(EXAMPLE)[:count]:
        grid.set(c.x, c.y, "#")
    return grid


def test_example_shortest_path():
    assert Finder(example_grid(12)).walk(Coords(0, 0), Coords(6, 6), False) == 22


def test_path_exists_finds_some_path():
    assert Finder(example_grid(12)).walk(Coords(0, 0), Coords(6, 6), True) >= 22


def test_first_blocking_byte():
    coords = parse(EXAMPLE)
    grid = example_grid(12)
    finder = Finder(grid)
    blocker = None
    for c in coords[12:]:
        grid.set(c.x, c.y, "#")
        if finder.walk(Coords(0, 0), Coords(6, 6), True) == 0:
            blocker = c
            break
    assert blocker == Coords(6, 1)


def test_start_equals_end():
    assert Finder(example_grid(0)).walk((3, 3), (3, 3)) == 0


def test_open_grid_distance():
    assert Finder(example_grid(0)).walk((0, 0), (6, 6)) == 12