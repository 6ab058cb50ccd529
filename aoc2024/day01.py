"""Historian Hysteria: compare two lists of location IDs."""

from __future__ import annotations

import re
from collections import Counter

_PAIR = re.compile(r"([+-]?\d+)\s+([+-]?\d+)")


def _parse(text: str) -> list[tuple[int, int]]:
    """Read the leading run of well-formed "left right" lines."""
    pairs: list[tuple[int, int]] = []
    for line in text.splitlines():
        match = _PAIR.match(line)
        if match is None:
            break
        pairs.append((int(match[1]), int(match[2])))
        if match.end() != len(line):
            break
    if not pairs:
        raise ValueError("input holds no pair of location IDs")
    return pairs


def part1(text: str) -> int:
    """Total distance between the two lists once both are sorted."""
    left, right = zip(*_parse(text))
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left ID times its count in the right list."""
    left, right = zip(*_parse(text))
    counts = Counter(right)
    return sum(a * counts[a] for a in left)