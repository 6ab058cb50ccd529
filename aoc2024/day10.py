"""Hoof It: score and rate the hiking trails on a topographic map."""

from __future__ import annotations

import re
from collections.abc import Iterator

Position = tuple[int, int]

_ROW = re.compile(r"[.0-9]+")
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_TRAILHEAD = 0
_SUMMIT = 9


def _parse(text: str) -> dict[Position, int]:
    """Map each cell to its height; impassable cells get -1."""
    rows: list[str] = []
    for line in text.splitlines():
        match = _ROW.match(line)
        if match is None:
            break
        rows.append(match[0])
        if match.end() != len(line):
            break
    if not rows:
        raise ValueError("input holds no map")
    return {
        (r, c): int(char) if char.isdigit() else -1
        for r, row in enumerate(rows)
        for c, char in enumerate(row)
    }


def _summits(heights: dict[Position, int], pos: Position) -> Iterator[Position]:
    """The summit reached by every distinct uphill trail from pos."""
    height = heights[pos]
    if height == _SUMMIT:
        yield pos
        return
    r, c = pos
    for dr, dc in _STEPS:
        ahead = (r + dr, c + dc)
        if heights.get(ahead) == height + 1:
            yield from _summits(heights, ahead)


def _trailheads(heights: dict[Position, int]) -> Iterator[Position]:
    return (pos for pos, height in heights.items() if height == _TRAILHEAD)


def part1(text: str) -> int:
    """Sum over trailheads of the number of distinct summits reachable."""
    heights = _parse(text)
    return sum(len(set(_summits(heights, start))) for start in _trailheads(heights))


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails to a summit."""
    heights = _parse(text)
    return sum(
        sum(1 for _ in _summits(heights, start)) for start in _trailheads(heights)
    )