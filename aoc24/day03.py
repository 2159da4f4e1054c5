"""Scanning corrupted memory for mul, do and don't instructions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from aoc24.nums import must_parse

COMMANDS = {"do": 0, "mul": 2, "don't": 0}

PARAM_BEGIN = "("
PARAM_END = ")"
PARAM_SEP = ","


@dataclass(frozen=True)
class Cmd:
    name: str
    params: tuple[int, ...]


class _EndOfInput(Exception):
    pass


class _SoftError(Exception):
    pass


class _Stream:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read(self) -> str:
        if self._pos >= len(self._text):
            raise _EndOfInput
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def peek(self) -> str:
        if self._pos >= len(self._text):
            raise _EndOfInput
        return self._text[self._pos]


def _scan_command(stream: _Stream) -> str:
    acc = ""
    while True:
        ch = stream.read()
        done = stream.peek() == PARAM_BEGIN
        acc += ch
        if done:
            if acc in COMMANDS:
                return acc
            acc = ""
            continue
        if not any(cmd.startswith(acc) for cmd in COMMANDS):
            acc = ""


def _scan_params(stream: _Stream) -> list[int]:
    if stream.read() != PARAM_BEGIN:
        raise _SoftError("unexpected start token")
    params: list[int] = []
    acc = ""
    while True:
        ch = stream.read()
        if ch == PARAM_SEP:
            if not acc:
                raise _SoftError("unexpected separator")
            params.append(must_parse(acc))
            acc = ""
        elif ch == PARAM_END:
            if acc:
                params.append(must_parse(acc))
            return params
        elif "0" <= ch <= "9":
            acc += ch
        else:
            raise _SoftError("unexpected token")


def parse_iter(text: str) -> Iterator[Cmd]:
    """Yield every well-formed instruction found in the text."""
    stream = _Stream(text)
    while True:
        try:
            name = _scan_command(stream)
            params = _scan_params(stream)
        except _SoftError:
            continue
        except _EndOfInput:
            return
        if len(params) != COMMANDS[name]:
            continue
        yield Cmd(name, tuple(params))


def mul_sum(text: str) -> int:
    """Sum of all mul products."""
    return sum(cmd.params[0] * cmd.params[1] for cmd in parse_iter(text) if cmd.name == "mul")


def mul_sum_toggle(text: str) -> int:
    """Sum of mul products, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for cmd in parse_iter(text):
        if cmd.name == "mul":
            if enabled:
                total += cmd.params[0] * cmd.params[1]
        elif cmd.name == "do":
            enabled = True
        elif cmd.name == "don't":
            enabled = False
    return total