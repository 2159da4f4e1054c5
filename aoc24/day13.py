"""Claw machines: how many button presses reach each prize."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

A_COST = 3
B_COST = 1


@dataclass(frozen=True)
class Button:
    dx: int
    dy: int


@dataclass(frozen=True)
class Target:
    x: int
    y: int


@dataclass(frozen=True)
class Machine:
    a_button: Button
    b_button: Button
    target: Target


def _det(a: int, b: int, c: int, d: int) -> int:
    return a * d - b * c


def _trunc_div(n: int, d: int) -> int:
    quotient = abs(n) // abs(d)
    return quotient if (n >= 0) == (d >= 0) else -quotient


def cramers_rule(ax: int, ay: int, bx: int, by: int, tx: int, ty: int) -> tuple[int, int]:
    """Solve a*(ax, ay) + b*(bx, by) == (tx, ty) in integers; (0, 0) when there is no such solution.

    Raises ZeroDivisionError when the two buttons are parallel.
    """
    denom = _det(ax, bx, ay, by)
    a = _trunc_div(_det(tx, bx, ty, by), denom)
    b = _trunc_div(_det(ax, tx, ay, ty), denom)

    if a * ax + b * bx != tx or a * ay + b * by != ty:
        return 0, 0
    return a, b


def calc_tokens(machines: Iterable[Machine], offset: int = 0) -> int:
    """Total tokens needed to win every winnable prize, with offset added to prize coordinates."""
    total = 0
    for machine in machines:
        a, b = cramers_rule(
            machine.a_button.dx,
            machine.a_button.dy,
            machine.b_button.dx,
            machine.b_button.dy,
            offset + machine.target.x,
            offset + machine.target.y,
        )
        total += a * A_COST + b * B_COST
    return total