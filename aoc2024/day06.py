"""Guard Gallivant: follow a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass

Position = tuple[int, int]

_HEADINGS = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_TURN_RIGHT = {(-1, 0): (0, 1), (0, 1): (1, 0), (1, 0): (0, -1), (0, -1): (-1, 0)}


@dataclass(frozen=True)
class _Lab:
    rows: int
    cols: int
    obstacles: frozenset[Position]
    start: Position
    heading: Position

    def inside(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols


def _parse(text: str) -> _Lab:
    lines = text.splitlines()
    if not lines:
        raise ValueError("input holds no map")
    cols = len(lines[0])
    obstacles: set[Position] = set()
    start: Position = (0, 0)
    heading = _HEADINGS["^"]
    for r, line in enumerate(lines):
        if len(line) > cols:
            raise ValueError(f"row {r} is wider than the first row")
        # Cells missing from a short row are never floor.
        obstacles.update((r, c) for c in range(len(line), cols))
        for c, char in enumerate(line):
            if char in _HEADINGS:
                start, heading = (r, c), _HEADINGS[char]
            elif char != ".":
                obstacles.add((r, c))
    return _Lab(len(lines), cols, frozenset(obstacles), start, heading)


def _route(lab: _Lab) -> set[Position]:
    """Every cell the guard stands on before leaving the map."""
    visited: set[Position] = set()
    (r, c), (dr, dc) = lab.start, lab.heading
    while True:
        visited.add((r, c))
        ahead = (r + dr, c + dc)
        if not lab.inside(ahead):
            return visited
        if ahead in lab.obstacles:
            dr, dc = _TURN_RIGHT[(dr, dc)]
            continue
        r, c = ahead


def _loops(lab: _Lab, extra: Position) -> bool:
    """Whether the guard loops forever once an obstacle is added at extra."""
    seen: set[tuple[int, int, Position]] = set()
    (r, c), heading = lab.start, lab.heading
    while True:
        dr, dc = heading
        ahead = (r + dr, c + dc)
        if not lab.inside(ahead):
            return False
        state = (r, c, heading)
        if state in seen:
            return True
        seen.add(state)
        if ahead in lab.obstacles or ahead == extra:
            heading = _TURN_RIGHT[heading]
            continue
        r, c = ahead


def part1(text: str) -> int:
    """Number of positions counted along the guard's route."""
    lab = _parse(text)
    visited: set[Position] = set()
    (r, c), (dr, dc) = lab.start, lab.heading
    while True:
        ahead = (r + dr, c + dc)
        if not lab.inside(ahead):
            break
        visited.add((r, c))
        if ahead in lab.obstacles:
            dr, dc = _TURN_RIGHT[(dr, dc)]
            continue
        r, c = ahead
    return len(visited) + 1


def part2(text: str) -> int:
    """Number of single obstacle placements that trap the guard in a loop."""
    lab = _parse(text)
    return sum(
        _loops(lab, pos) for pos in _route(lab) if pos != lab.start
    )