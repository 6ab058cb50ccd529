"""Mull It Over: add up multiplications hidden in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\(([+-]?\d+),([+-]?\d+)\)")
_INSTRUCTION = re.compile(r"mul\(([+-]?\d+),([+-]?\d+)\)|(do\(\))|(don't\(\))")


def part1(text: str) -> int:
    """Sum of every well-formed mul(a,b)."""
    return sum(int(m[1]) * int(m[2]) for m in _MUL.finditer(text))


def part2(text: str) -> int:
    """Sum of the mul(a,b) instructions enabled by do() and don't()."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match[3]:
            enabled = True
        elif match[4]:
            enabled = False
        elif enabled:
            total += int(match[1]) * int(match[2])
    return total