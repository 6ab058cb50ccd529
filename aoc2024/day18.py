"""RAM Run: find a way out of a memory space as bytes fall into it."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Sequence

Position = tuple[int, int]

_NUMBER = re.compile(r"[+-]?\d+")
_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _parse(text: str, count: int | None = None) -> list[Position]:
    """Read "x,y" byte positions, at most count of them when given."""
    positions: list[Position] = []
    for index, line in enumerate(text.splitlines()):
        if index == count:
            break
        fields = line.split(",")
        if len(fields) < 2:
            raise ValueError(f"line {index + 1} holds no y coordinate")
        x, y = fields[0], fields[1]
        if not (_NUMBER.fullmatch(x) and _NUMBER.fullmatch(y)):
            raise ValueError(f"line {index + 1} is not a pair of numbers")
        positions.append((int(x), int(y)))
    return positions


def _shortest(blocked: Iterable[Position], width: int, height: int) -> int | None:
    """Steps from the top-left corner to the exit, or None when cut off."""
    walls = set(blocked)
    start = (0, 0)
    end = (width - 1, height - 1)
    inside = range(height)
    steps = {start: 0}
    pending = deque([start])
    while pending:
        pos = pending.popleft()
        if pos == end:
            return steps[pos]
        x, y = pos
        for dx, dy in _STEPS:
            ahead = (x + dx, y + dy)
            if (
                ahead[0] in inside
                and ahead[1] in inside
                and ahead not in walls
                and ahead not in steps
            ):
                steps[ahead] = steps[pos] + 1
                pending.append(ahead)
    return None


def part1(text: str, width: int, height: int, count: int) -> int:
    """Fewest steps to the exit once the first count bytes have fallen."""
    result = _shortest(_parse(text, count), width, height)
    if result is None:
        raise ValueError("no path leads to the exit")
    return result


def _path_exists(blocked: Sequence[Position], width: int, height: int) -> bool:
    return _shortest(blocked, width, height) is not None


def part2(text: str, width: int, height: int) -> str:
    """Coordinates "x,y" of the byte found by bisecting on reachability."""
    cells = _parse(text)
    if not cells:
        raise ValueError("input holds no falling byte")
    left, right = 0, len(cells)
    middle = 0
    while right - left != 1:
        middle = (left + right) // 2
        if _path_exists(cells[:middle], width, height):
            left = middle
        else:
            right = middle
    x, y = cells[middle]
    return f"{x},{y}"