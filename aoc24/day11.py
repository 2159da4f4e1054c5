"""Stones that change and split every time you blink."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from aoc24.nums import num_digits

StoneRule = Callable[[int], "list[int] | None"]


def rule_zero(stone: int) -> list[int] | None:
    """A 0 becomes a 1."""
    if stone != 0:
        return None
    return [stone + 1]


def rule_even(stone: int) -> list[int] | None:
    """A stone with an even number of digits splits into its two halves."""
    digits = num_digits(stone)
    if digits % 2 != 0:
        return None
    left, right = divmod(stone, 10 ** (digits // 2))
    return [left, right]


def rule_default(stone: int) -> list[int] | None:
    """Any other stone is multiplied by 2024."""
    return [2024 * stone]


DEFAULT_RULES: tuple[StoneRule, ...] = (rule_zero, rule_even, rule_default)


def apply_rules(stones: Iterable[int], rules: Sequence[StoneRule]) -> list[int]:
    """Replace each stone by the output of the first rule that applies to it."""
    result: list[int] = []
    for stone in stones:
        for rule in rules:
            out = rule(stone)
            if out is not None:
                result.extend(out)
                break
    return result


def apply_rule_steps(stone: int, rules: Sequence[StoneRule], steps: int) -> list[int]:
    """The stones one stone becomes after the given number of blinks."""
    result = [stone]
    for _ in range(steps):
        result = apply_rules(result, rules)
    return result


@dataclass
class CountState:
    """Rules, blinks per jump, and caches shared across counts."""

    rules: Sequence[StoneRule]
    stride: int
    totals_cache: dict[int, dict[int, int]] = field(default_factory=dict)
    jump_cache: dict[int, list[int]] = field(default_factory=dict)


def count_stones(stones: Iterable[int], state: CountState, level: int) -> int:
    """Number of stones after `level` blinks, jumping `state.stride` blinks at a time."""
    stones = list(stones)
    if level == 0:
        return len(stones)
    if level < 0 or state.stride <= 0:
        raise ValueError("level must be a non-negative multiple of a positive stride")

    totals = state.totals_cache.setdefault(level, {})
    total = 0

    for stone in stones:
        value = totals.get(stone)
        if value is None:
            batch = state.jump_cache.get(stone)
            if batch is None:
                batch = apply_rule_steps(stone, state.rules, state.stride)
                state.jump_cache[stone] = batch
            value = count_stones(batch, state, level - state.stride)
            totals[stone] = value
        total += value

    return total