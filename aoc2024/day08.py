"""Resonant Collinearity: place antinodes of same-frequency antennas."""

from __future__ import annotations

import re
from collections import defaultdict
from itertools import permutations
from dataclasses import dataclass

Position = tuple[int, int]

_ROW = re.compile(r"[.0-9a-zA-Z]+")


@dataclass(frozen=True)
class _City:
    rows: int
    cols: int
    antennas: dict[str, list[Position]]

    def inside(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def pairs(self):
        """Every ordered pair of distinct antennas sharing a frequency."""
        for positions in self.antennas.values():
            yield from permutations(positions, 2)


def _parse(text: str) -> _City:
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
    antennas: dict[str, list[Position]] = defaultdict(list)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char != ".":
                antennas[char].append((r, c))
    return _City(len(rows), len(rows[0]), dict(antennas))


def part1(text: str) -> int:
    """Distinct in-bounds antinodes one step beyond each antenna pair."""
    city = _parse(text)
    antinodes: set[Position] = set()
    for (ar, ac), (br, bc) in city.pairs():
        dr, dc = ar - br, ac - bc
        for pos in ((ar + dr, ac + dc), (br - dr, bc - dc)):
            if city.inside(pos):
                antinodes.add(pos)
    return len(antinodes)


def part2(text: str) -> int:
    """Distinct in-bounds antinodes at every multiple along each pair's line."""
    city = _parse(text)
    antinodes: set[Position] = set()
    for a, b in city.pairs():
        antinodes.update((a, b))
        (ar, ac), (br, bc) = a, b
        dr, dc = ar - br, ac - bc
        step = 1
        while True:
            candidates = [
                (ar + dr * step, ac + dc * step),
                (br - dr * step, bc - dc * step),
            ]
            inside = [pos for pos in candidates if city.inside(pos)]
            if not inside:
                break
            antinodes.update(inside)
            step += 1
    return len(antinodes)