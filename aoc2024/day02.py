"""Red-Nosed Reports: decide which level reports are safe."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import pairwise

_REPORT = re.compile(r"[+-]?\d+(?: [+-]?\d+)*")


def _parse(text: str) -> list[list[int]]:
    """Read the leading run of space-separated level reports."""
    reports: list[list[int]] = []
    for line in text.splitlines():
        match = _REPORT.match(line)
        if match is None:
            break
        reports.append([int(n) for n in match[0].split(" ")])
        if match.end() != len(line):
            break
    if not reports:
        raise ValueError("input holds no report")
    return reports


def _is_safe(levels: Sequence[int]) -> bool:
    """Strictly monotone, with neighbours differing by one to three."""
    diffs = [b - a for a, b in pairwise(levels)]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def _is_safe_with_dampener(levels: Sequence[int]) -> bool:
    if _is_safe(levels):
        return True
    return any(
        _is_safe([*levels[:skip], *levels[skip + 1 :]]) for skip in range(len(levels))
    )


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(_is_safe(report) for report in _parse(text))


def part2(text: str) -> int:
    """Number of reports that are safe after removing at most one level."""
    return sum(_is_safe_with_dampener(report) for report in _parse(text))