"""Print Queue: check page updates against ordering rules."""

from __future__ import annotations

import re

_RULE = re.compile(r"(\d+)\|(\d+)")
_UPDATE = re.compile(r"\d+(?:,\d+)*")

Rules = set[tuple[int, int]]


def _parse(text: str) -> tuple[Rules, list[list[int]]]:
    lines = iter(text.splitlines())
    rules: Rules = set()
    line = next(lines, None)
    while line is not None:
        match = _RULE.fullmatch(line)
        if match is None:
            break
        rules.add((int(match[1]), int(match[2])))
        line = next(lines, None)
    if not rules:
        raise ValueError("input holds no ordering rule")
    while line is not None and not line.strip():
        line = next(lines, None)
    updates: list[list[int]] = []
    while line is not None:
        match = _UPDATE.match(line)
        if match is None:
            break
        updates.append([int(n) for n in match[0].split(",")])
        if match.end() != len(line):
            break
        line = next(lines, None)
    if not updates:
        raise ValueError("input holds no page update")
    return rules, updates


def _first_violation(rules: Rules, pages: list[int]) -> tuple[int, int] | None:
    """Indices of the first pair of pages not ordered by a rule, if any."""
    for i, first in enumerate(pages):
        for j in range(i + 1, len(pages)):
            if (first, pages[j]) not in rules:
                return i, j
    return None


def part1(text: str) -> int:
    """Sum of the middle pages of correctly ordered updates."""
    rules, updates = _parse(text)
    return sum(
        pages[len(pages) // 2]
        for pages in updates
        if _first_violation(rules, pages) is None
    )


def part2(text: str) -> int:
    """Sum of the middle pages of wrongly ordered updates once reordered."""
    rules, updates = _parse(text)
    total = 0
    for pages in updates:
        pages = list(pages)
        fixed = False
        while (violation := _first_violation(rules, pages)) is not None:
            i, j = violation
            pages[i], pages[j] = pages[j], pages[i]
            fixed = True
        if fixed:
            total += pages[len(pages) // 2]
    return total