"""Garden Groups: price the fencing around garden plot regions."""

from __future__ import annotations

import re

Position = tuple[int, int]

_ROW = re.compile(r"[A-Z]+")
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_CORNER_PAIRS = (((-1, 0), (0, 1)), ((0, 1), (1, 0)), ((1, 0), (0, -1)), ((0, -1), (-1, 0)))


def _parse(text: str) -> dict[Position, str]:
    rows: list[str] = []
    for line in text.splitlines():
        match = _ROW.match(line)
        if match is None:
            break
        rows.append(match[0])
        if match.end() != len(line):
            break
    if not rows:
        raise ValueError("input holds no garden map")
    return {(r, c): char for r, row in enumerate(rows) for c, char in enumerate(row)}


def _regions(garden: dict[Position, str]) -> list[set[Position]]:
    """Connected groups of plots growing the same plant."""
    seen: set[Position] = set()
    regions: list[set[Position]] = []
    for start, plant in garden.items():
        if start in seen:
            continue
        region = {start}
        pending = [start]
        while pending:
            r, c = pending.pop()
            for dr, dc in _STEPS:
                ahead = (r + dr, c + dc)
                if ahead not in region and garden.get(ahead) == plant:
                    region.add(ahead)
                    pending.append(ahead)
        seen |= region
        regions.append(region)
    return regions


def _perimeter(region: set[Position]) -> int:
    return sum(
        (r + dr, c + dc) not in region for r, c in region for dr, dc in _STEPS
    )


def _corners(region: set[Position]) -> int:
    """Number of corners, which equals the number of straight sides."""
    count = 0
    for r, c in region:
        for (ar, ac), (br, bc) in _CORNER_PAIRS:
            first = (r + ar, c + ac) in region
            second = (r + br, c + bc) in region
            diagonal = (r + ar + br, c + ac + bc) in region
            if (first and second and not diagonal) or (not first and not second):
                count += 1
    return count


def part1(text: str) -> int:
    """Total price: area times perimeter for each region."""
    return sum(len(region) * _perimeter(region) for region in _regions(_parse(text)))


def part2(text: str) -> int:
    """Discounted price: area times number of sides for each region."""
    return sum(len(region) * _corners(region) for region in _regions(_parse(text)))