"""Plutonian Pebbles: count stones that split and change as you blink."""

from __future__ import annotations

from collections import Counter


def _parse(text: str) -> Counter[int]:
    return Counter(int(word) for word in text.strip().split(" "))


def _blink(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_stones(text: str, blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    stones = _parse(text)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, count in stones.items():
            for result in _blink(stone):
                following[result] += count
        stones = following
    return sum(stones.values())