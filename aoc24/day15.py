"""A robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field

Position = tuple[int, int]

WALL = "#"
ROBOT = "@"
BOX_LEFT = "["
BOX_RIGHT = "]"

DELTAS: dict[str, Position] = {
    "<": (-1, 0),
    "^": (0, -1),
    ">": (1, 0),
    "v": (0, 1),
}

_SHOWN = frozenset("#O@[]")


@dataclass
class Warehouse:
    """Occupied cells by position; empty cells are absent from data."""

    data: dict[Position, str] = field(default_factory=dict)
    bot: Position = (0, 0)
    width: int = 0
    height: int = 0

    def move(self, direction: str) -> None:
        """Try to move the robot one step; unknown directions are ignored."""
        delta = DELTAS.get(direction)
        if delta is None:
            return
        target = move(self, self.bot, delta, False)
        if target is not None:
            move(self, self.bot, delta, True)
            self.bot = target

    def render(self) -> str:
        """Draw the warehouse, one line per row."""
        rows = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                if (x, y) == self.bot:
                    chars.append(ROBOT)
                    continue
                cell = self.data.get((x, y))
                chars.append("." if cell is None else cell if cell in _SHOWN else "?")
            rows.append("".join(chars))
        return "".join(row + "\n" for row in rows)


def next_positions(data: dict[Position, str], pos: Position, delta: Position) -> list[Position]:
    """Cells that must make room when the item at pos moves by delta.

    Moving vertically into half of a wide box also involves the box's other half.
    """
    first = (pos[0] + delta[0], pos[1] + delta[1])
    positions = [first]
    if delta[1] != 0:
        cell = data.get(first)
        if cell == BOX_LEFT:
            positions.append((first[0] + 1, first[1]))
        elif cell == BOX_RIGHT:
            positions.append((first[0] - 1, first[1]))
    return positions


def move(warehouse: Warehouse, pos: Position, delta: Position, commit: bool) -> Position | None:
    """Check (and with commit, perform) moving the item at pos by delta.

    Returns where the item ends up, pos itself for an empty cell, or None when blocked.
    """
    data = warehouse.data
    value = data.get(pos)
    if value is None:
        return pos
    if value == WALL:
        return None

    nexts = next_positions(data, pos, delta)
    for nxt in nexts:
        if move(warehouse, nxt, delta, commit) is None:
            return None

    if commit:
        data[nexts[0]] = data.pop(pos)
        for other in nexts[1:]:
            data.pop(other, None)

    return nexts[0]


def sum_gps(warehouse: Warehouse, entity: str) -> int:
    """Sum of x + 100*y over cells holding entity."""
    return sum(x + 100 * y for (x, y), cell in warehouse.data.items() if cell == entity)