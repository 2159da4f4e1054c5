"""Robots wrapping around a toroidal room."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from aoc24.nums import modulo


@dataclass
class Bot:
    x: int
    y: int
    dx: int
    dy: int


@dataclass
class Space:
    """A width x height room whose edges wrap around."""

    bots: list[Bot] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def run(self, steps: int) -> None:
        """Advance every robot by the given number of seconds."""
        for bot in self.bots:
            bot.x = modulo(bot.x + steps * bot.dx, self.width)
            bot.y = modulo(bot.y + steps * bot.dy, self.height)


def _quadrant(width: int, height: int, x: int, y: int) -> int:
    w_mid = width // 2
    h_mid = height // 2
    if x < w_mid and y < h_mid:
        return 1
    if x > w_mid and y < h_mid:
        return 2
    if x < w_mid and y > h_mid:
        return 3
    if x > w_mid and y > h_mid:
        return 4
    return 0


def quadrant_count(space: Space) -> list[int]:
    """Robot counts per quadrant; index 0 counts robots on the middle lines."""
    counts = [0] * 5
    for bot in space.bots:
        counts[_quadrant(space.width, space.height, bot.x, bot.y)] += 1
    return counts


def signal_detect(width: int, height: int, runlen: int) -> Callable[[Iterable[Bot]], bool]:
    """Build a check for a horizontal run of at least runlen occupied cells."""

    def detect(bots: Iterable[Bot]) -> bool:
        occupied = {(bot.x, bot.y) for bot in bots}
        for y in range(height):
            run = 0
            for x in range(width):
                if (x, y) not in occupied:
                    run = 0
                    continue
                run += 1
                if run >= runlen:
                    return True
        return False

    return detect


def render_space(space: Space) -> str:
    """Draw the room: '.' for empty cells, else the number of robots there."""
    counts = Counter((bot.x, bot.y) for bot in space.bots)
    rows = (
        "".join(str(counts[(x, y)]) if counts[(x, y)] else "." for x in range(space.width))
        for y in range(space.height)
    )
    return "".join(row + "\n" for row in rows)