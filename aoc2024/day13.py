"""Claw Contraption: find the cheapest button presses that win each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"\d+")
_PRIZE_OFFSET = 10_000_000_000_000
_COST_A = 3
_COST_B = 1


@dataclass(frozen=True)
class _Machine:
    ax: int
    ay: int
    bx: int
    by: int
    px: int
    py: int

    def presses(self, offset: int = 0) -> tuple[int, int] | None:
        """Presses of A and B that land on the prize, if exactly one pair does."""
        px, py = self.px + offset, self.py + offset
        det = self.ax * self.by - self.bx * self.ay
        if det == 0:
            return None
        a_num = px * self.by - self.bx * py
        b_num = self.ax * py - px * self.ay
        if a_num % det or b_num % det:
            return None
        return a_num // det, b_num // det


def _parse(text: str) -> list[_Machine]:
    numbers = [int(n) for n in _NUMBER.findall(text)]
    machines = [
        _Machine(*numbers[i : i + 6]) for i in range(0, len(numbers) - 5, 6)
    ]
    if not machines:
        raise ValueError("input holds no claw machine")
    return machines


def _total_tokens(text: str, offset: int) -> int:
    total = 0
    for machine in _parse(text):
        solution = machine.presses(offset)
        if solution is not None:
            a, b = solution
            total += a * _COST_A + b * _COST_B
    return total


def part1(text: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _total_tokens(text, 0)


def part2(text: str) -> int:
    """Fewest tokens once every prize lies 10,000,000,000,000 further out."""
    return _total_tokens(text, _PRIZE_OFFSET)