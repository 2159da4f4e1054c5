"""Checking and repairing page orderings against precedence rules."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from functools import cmp_to_key


class PrintQueue:
    """Page ordering rules: rules[page] lists pages that must come after it."""

    def __init__(self, rules: dict[int, list[int]]) -> None:
        self.rules = rules

    def validate(self, update: Sequence[int]) -> bool:
        """Whether every page precedes the pages its rules say follow it."""
        indices = {page: index for index, page in enumerate(update)}
        return all(
            index <= indices[after]
            for index, page in enumerate(update)
            for after in self.rules.get(page, ())
            if after in indices
        )

    def fix(self, update: Sequence[int]) -> tuple[list[int], bool]:
        """Return the update in rule order and whether it had to change."""
        if self.validate(update):
            return list(update), False
        return sorted(update, key=cmp_to_key(self._compare)), True

    def _compare(self, a: int, b: int) -> int:
        successors = self.rules.get(a, ())
        if b in successors:
            return -1
        return 1


def tuples_to_rules(tuples: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    """Group (before, after) pairs into a rules mapping."""
    rules: defaultdict[int, list[int]] = defaultdict(list)
    for before, after in tuples:
        rules[before].append(after)
    return dict(rules)