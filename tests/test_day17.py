import pytest

from aoc24.day17 import VM, code_breaker
from aoc24.nums import join_ints

PROGRAM = [2, 4, 1, 2, 7, 5, 1, 3, 4, 3, 5, 5, 0, 3, 3, 0]


@pytest.mark.parametrize(
    "program, a, b, c, expected_out, expected_regs",
    [
        ([2, 6], 0, 0, 9, None, [0, 1, 0]),
        ([5, 0, 5, 1, 5, 4], 10, 0, 0, [0, 1, 2], []),
        ([0, 1, 5, 4, 3, 0], 2024, 0, 0, [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0], []),
        ([1, 7], 0, 29, 0, None, [0, 26, 0]),
        ([4, 0], 0, 2024, 43690, None, [0, 44354, 0]),
    ],
)
def test_examples(program, a, b, c, expected_out, expected_regs):
    vm = VM(program, a, b, c)
    vm.run()
    if expected_out is not None:
        assert vm.out == expected_out
    regs = [vm.a, vm.b, vm.c]
    for actual, expected in zip(regs, expected_regs):
        if expected != 0:
            assert actual == expected


def test_puzzle_program_output():
    vm = VM(PROGRAM, 64584136, 0, 0)
    vm.run()
    assert join_ints(vm.out) == "3,7,1,7,2,1,0,6,3"


def test_code_breaker_example():
    assert sorted(code_breaker(0, [0, 3, 5, 4, 3, 0], 1))[0] == 117440


def test_code_breaker_puzzle_program():
    values = sorted(code_breaker(0, PROGRAM, 1))
    assert values[0] == 37221334433268
    vm = VM(PROGRAM, values[0], 0, 0)
    vm.run()
    assert vm.out == PROGRAM


def test_invalid_combo_operand():
    with pytest.raises(ValueError):
        VM([]).combo(7)


def test_invalid_opcode():
    vm = VM([8, 0])
    with pytest.raises(ValueError):
        vm.run()