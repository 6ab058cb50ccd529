"""Restroom Redoubt: predict where the security robots patrol."""

from __future__ import annotations

import re
from dataclasses import dataclass

Position = tuple[int, int]

_ROBOT = re.compile(r"p=([+-]?\d+),([+-]?\d+) v=([+-]?\d+),([+-]?\d+)")
_SECONDS = 100
_SEARCH_LIMIT = 2**31 - 1


@dataclass(frozen=True)
class _Robot:
    px: int
    py: int
    vx: int
    vy: int

    def position(self, seconds: int, height: int, width: int) -> Position:
        """Where the robot stands after the given time on a wrapping floor."""
        return (
            (self.px + self.vx * seconds) % width,
            (self.py + self.vy * seconds) % height,
        )


def _parse(text: str) -> list[_Robot]:
    """Read the leading run of "p=x,y v=dx,dy" lines."""
    robots: list[_Robot] = []
    for line in text.splitlines():
        match = _ROBOT.match(line)
        if match is None:
            break
        robots.append(_Robot(*(int(group) for group in match.groups())))
        if match.end() != len(line):
            break
    if not robots:
        raise ValueError("input holds no robot")
    return robots


def part1(text: str, height: int, width: int) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    half_x, half_y = width // 2, height // 2
    quadrants = [0, 0, 0, 0]
    for robot in _parse(text):
        x, y = robot.position(_SECONDS, height, width)
        if x == half_x or y == half_y:
            continue
        quadrants[(x > half_x) + 2 * (y > half_y)] += 1
    a, b, c, d = quadrants
    return a * b * c * d


def part2(text: str, height: int, width: int) -> int:
    """First second at which no two robots share a position."""
    robots = _parse(text)
    # Positions repeat with a period dividing width * height.
    for seconds in range(min(width * height, _SEARCH_LIMIT)):
        positions = {robot.position(seconds, height, width) for robot in robots}
        if len(positions) == len(robots):
            return seconds
    raise ValueError("robots never all stand on distinct positions")