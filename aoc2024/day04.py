"""Ceres Search: find XMAS in a letter grid."""

from __future__ import annotations

_DIRECTIONS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


def _parse(text: str) -> dict[tuple[int, int], str]:
    lines = text.splitlines()
    if len({len(line) for line in lines}) > 1:
        raise ValueError("grid rows have different lengths")
    return {
        (r, c): char for r, line in enumerate(lines) for c, char in enumerate(line)
    }


def part1(text: str) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    grid = _parse(text)
    return sum(
        "".join(grid.get((r + k * dr, c + k * dc), "") for k in range(4)) == "XMAS"
        for (r, c) in grid
        for dr, dc in _DIRECTIONS
    )


def part2(text: str) -> int:
    """Number of MAS crosses centred on an A."""
    grid = _parse(text)
    mas = {"M", "S"}
    count = 0
    for (r, c), char in grid.items():
        if char != "A":
            continue
        diagonal = {grid.get((r - 1, c + 1)), grid.get((r + 1, c - 1))}
        anti_diagonal = {grid.get((r - 1, c - 1)), grid.get((r + 1, c + 1))}
        if diagonal == mas and anti_diagonal == mas:
            count += 1
    return count