"""Finding operator combinations that make calibration equations hold."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from aoc24.nums import num_digits


@dataclass
class Task:
    """An equation: the expected result and its operands in order."""

    result: int
    nums: list[int] = field(default_factory=list)


class Op(Enum):
    ADD = "+"
    MUL = "×"
    CAT = "|"

    def apply(self, left: int, right: int) -> int:
        if self is Op.ADD:
            return left + right
        if self is Op.MUL:
            return left * right
        return left * 10 ** num_digits(right) + right


def _results(target: int, ops: Sequence[Op], operands: Sequence[int], prev: int) -> Iterator[int]:
    if prev > target:
        return
    head, rest = operands[0], operands[1:]
    for op in ops:
        value = op.apply(prev, head)
        if rest:
            yield from _results(target, ops, rest, value)
        else:
            yield value


def match_expr(task: Task, ops: Sequence[Op]) -> bool:
    """Whether some left-to-right choice of operators yields the task's result."""
    if len(task.nums) < 2:
        raise ValueError("an equation needs at least two numbers")
    return any(value == task.result for value in _results(task.result, ops, task.nums[1:], task.nums[0]))