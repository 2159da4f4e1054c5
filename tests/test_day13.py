import re

import pytest

from aoc24.day13 import Button, Machine, Target, calc_tokens, cramers_rule

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""

OFFSET = 10000000000000


def parse(text):
    machines = []
    for block in text.strip().split("\n\n"):
        ax, ay, bx, by, tx, ty = (int(n) for n in re.findall(r"\d+", block))
        machines.append(Machine(Button(ax, ay), Button(bx, by), Target(tx, ty)))
    return machines


def test_example_total():
    assert calc_tokens(parse(EXAMPLE), 0) == 480


def test_solvable_machine():
    assert cramers_rule(94, 34, 22, 67, 8400, 5400) == (80, 40)
    assert cramers_rule(17, 86, 84, 37, 7870, 6450) == (38, 86)


def test_unsolvable_machine():
    assert cramers_rule(26, 66, 67, 21, 12748, 12176) == (0, 0)


def test_parallel_buttons_raise():
    with pytest.raises(ZeroDivisionError):
        cramers_rule(1, 1, 2, 2, 3, 3)


def test_offset_changes_winnable_machines():
    machines = parse(EXAMPLE)
    assert calc_tokens([machines[0], machines[2]], OFFSET) == 0
    a, b = cramers_rule(26, 66, 67, 21, 12748 + OFFSET, 12176 + OFFSET)
    assert a > 0
    assert a * 26 + b * 67 == 12748 + OFFSET
    assert a * 66 + b * 21 == 12176 + OFFSET