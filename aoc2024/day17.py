"""Chronospatial Computer: run a three-bit program and collect its output."""

from __future__ import annotations

import re

_PROGRAM = re.compile(
    r"Register A: (\d+)\nRegister B: (\d+)\nRegister C: (\d+)\n\nProgram: (\d+(?:,\d+)*)"
)
_WORD_BITS = 32


def _parse(text: str) -> tuple[int, int, int, list[int]]:
    match = _PROGRAM.match(text)
    if match is None:
        raise ValueError("input is not a register listing followed by a program")
    a, b, c = (int(match[i]) for i in (1, 2, 3))
    if max(a, b, c) >= 1 << _WORD_BITS:
        raise ValueError("register value does not fit in 32 bits")
    program = [int(n) for n in match[4].split(",")]
    return a, b, c, program


def _divide(a: int, exponent: int) -> int:
    if exponent >= _WORD_BITS:
        raise ValueError(f"power of two 2**{exponent} overflows a 32-bit register")
    return a >> exponent


def part1(text: str) -> str:
    """Comma-separated output of the program."""
    a, b, c, program = _parse(text)
    out: list[int] = []
    pointer = 0

    def operand() -> int:
        if pointer + 1 >= len(program):
            raise ValueError(f"instruction at {pointer} has no operand")
        return program[pointer + 1]

    def combo() -> int:
        value = operand()
        if value <= 3:
            return value
        if value == 4:
            return a
        if value == 5:
            return b
        if value == 6:
            return c
        raise ValueError(f"invalid combo operand: {value}")

    while pointer < len(program):
        opcode = program[pointer]
        if opcode == 0:
            a = _divide(a, combo())
        elif opcode == 1:
            b ^= operand()
        elif opcode == 2:
            b = combo() % 8
        elif opcode == 3:
            if a != 0:
                pointer = operand()
                continue
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            out.append(combo() % 8)
        elif opcode == 6:
            b = _divide(a, combo())
        elif opcode == 7:
            c = _divide(a, combo())
        else:
            raise ValueError(f"invalid opcode: {opcode}")
        pointer += 2
    return ",".join(str(value) for value in out)