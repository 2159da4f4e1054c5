"""A three-bit computer and a search for a program that outputs itself."""

from __future__ import annotations

from collections.abc import Sequence


def _trunc_div(n: int, d: int) -> int:
    quotient = abs(n) // abs(d)
    return quotient if (n >= 0) == (d >= 0) else -quotient


class VM:
    """Runs a program of (opcode, operand) pairs over registers a, b and c."""

    def __init__(self, program: Sequence[int], a: int = 0, b: int = 0, c: int = 0) -> None:
        self.program = list(program)
        self.a = a
        self.b = b
        self.c = c
        self._ip = 0
        self._out: list[int] = []

    @property
    def out(self) -> list[int]:
        """Values produced by out instructions so far."""
        return list(self._out)

    def run(self) -> None:
        """Execute until the instruction pointer leaves the program."""
        while 0 <= self._ip < len(self.program) - 1:
            op, operand = self.program[self._ip], self.program[self._ip + 1]
            self._ip += 2
            self._execute(op, operand)

    def combo(self, operand: int) -> int:
        """Value of a combo operand: literals 0-3, or registers a, b, c for 4-6."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand: {operand}")

    def _dv(self, operand: int) -> int:
        return _trunc_div(self.a, 1 << self.combo(operand))

    def _execute(self, op: int, operand: int) -> None:
        match op:
            case 0:
                self.a = self._dv(operand)
            case 1:
                self.b ^= operand
            case 2:
                self.b = self.combo(operand) % 8
            case 3:
                if self.a != 0:
                    self._ip = operand
            case 4:
                self.b ^= self.c
            case 5:
                self._out.append(self.combo(operand) % 8)
            case 6:
                self.b = self._dv(operand)
            case 7:
                self.c = self._dv(operand)
            case _:
                raise ValueError(f"invalid opcode: {op}")


def code_breaker(initial: int, expected: Sequence[int], suffix: int = 1) -> list[int]:
    """Values of register a, built three bits at a time, for which the program prints itself."""
    expected = list(expected)
    found: list[int] = []
    for k in range(8):
        n = initial * 8 + k
        vm = VM(expected, n, 0, 0)
        vm.run()

        if vm.a > 0 or vm.b > 0 or vm.c > 0:
            continue

        actual = vm.out
        if len(actual) < suffix:
            continue

        if actual[len(actual) - suffix:] == expected[len(expected) - suffix:]:
            if suffix == len(expected):
                found.append(n)
            else:
                found.extend(code_breaker(n, expected, suffix + 1))
    return found