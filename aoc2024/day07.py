"""Bridge Repair: find which calibration equations can be made true."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

_EQUATION = re.compile(r"(\d+): (\d+(?: \d+)*)")

Operator = Callable[[int, int], int]


def _parse(text: str) -> list[tuple[int, list[int]]]:
    """Read the leading run of "target: n n ..." lines."""
    equations: list[tuple[int, list[int]]] = []
    for line in text.splitlines():
        match = _EQUATION.match(line)
        if match is None:
            break
        equations.append((int(match[1]), [int(n) for n in match[2].split(" ")]))
        if match.end() != len(line):
            break
    if not equations:
        raise ValueError("input holds no equation")
    return equations


def _add(a: int, b: int) -> int:
    return a + b


def _mul(a: int, b: int) -> int:
    return a * b


def _concat(a: int, b: int) -> int:
    return int(f"{a}{b}")


def _solvable(
    target: int, partial: int, rest: Sequence[int], operators: Sequence[Operator]
) -> bool:
    if not rest:
        return partial == target
    if partial > target:
        return False
    head, tail = rest[0], rest[1:]
    return any(_solvable(target, op(partial, head), tail, operators) for op in operators)


def _calibration(text: str, operators: Sequence[Operator]) -> int:
    return sum(
        target
        for target, values in _parse(text)
        if _solvable(target, values[0], values[1:], operators)
    )


def part1(text: str) -> int:
    """Sum of targets reachable with + and *, evaluated left to right."""
    return _calibration(text, (_add, _mul))


def part2(text: str) -> int:
    """Sum of targets reachable with +, * and digit concatenation."""
    return _calibration(text, (_add, _mul, _concat))