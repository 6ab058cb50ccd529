"""Reindeer Maze: find the cheapest routes through a maze."""

from __future__ import annotations

import heapq
import re
from collections import defaultdict
from dataclasses import dataclass

Position = tuple[int, int]
State = tuple[Position, Position]

_ROW = re.compile(r"[#.SE]+")
_EAST = (0, 1)
_STEP_COST = 1
_TURN_COST = 1000


@dataclass(frozen=True)
class _Maze:
    open_cells: frozenset[Position]
    start: Position
    end: Position


def _parse(text: str) -> _Maze:
    rows: list[str] = []
    for line in text.splitlines():
        match = _ROW.match(line)
        if match is None:
            break
        rows.append(match[0])
        if match.end() != len(line):
            break
    if not rows:
        raise ValueError("input holds no maze")
    cells = {(r, c): char for r, row in enumerate(rows) for c, char in enumerate(row)}
    start = next((pos for pos, char in cells.items() if char == "S"), None)
    if start is None:
        raise ValueError("maze has no start tile")
    end = next((pos for pos, char in cells.items() if char == "E"), None)
    if end is None:
        raise ValueError("maze has no end tile")
    open_cells = frozenset(pos for pos, char in cells.items() if char != "#")
    return _Maze(open_cells, start, end)


def _moves(maze: _Maze, state: State) -> list[tuple[State, int]]:
    (r, c), (dr, dc) = state
    moves: list[tuple[State, int]] = []
    ahead = (r + dr, c + dc)
    if ahead in maze.open_cells:
        moves.append(((ahead, (dr, dc)), _STEP_COST))
    moves.append((((r, c), (-dc, dr)), _TURN_COST))
    moves.append((((r, c), (dc, -dr)), _TURN_COST))
    return moves


def _search(maze: _Maze) -> tuple[int, list[State], dict[State, list[State]]]:
    """Lowest cost, the end states reached at that cost, and optimal predecessors."""
    start: State = (maze.start, _EAST)
    dist: dict[State, int] = {start: 0}
    preds: dict[State, list[State]] = defaultdict(list)
    heap: list[tuple[int, State]] = [(0, start)]
    best: int | None = None
    goals: list[State] = []
    while heap:
        cost, state = heapq.heappop(heap)
        if cost > dist[state]:
            continue
        if best is not None and cost > best:
            break
        if state[0] == maze.end:
            best = cost
            goals.append(state)
            continue
        for following, step in _moves(maze, state):
            new_cost = cost + step
            known = dist.get(following)
            if known is None or new_cost < known:
                dist[following] = new_cost
                preds[following] = [state]
                heapq.heappush(heap, (new_cost, following))
            elif new_cost == known:
                preds[following].append(state)
    if best is None:
        raise ValueError("no path leads from start to end")
    return best, goals, preds


def part1(text: str) -> int:
    """Lowest score a reindeer can get from start to end."""
    best, _, _ = _search(_parse(text))
    return best


def part2(text: str) -> int:
    """Number of tiles lying on at least one of the best paths."""
    _, goals, preds = _search(_parse(text))
    seen: set[State] = set(goals)
    pending = list(goals)
    while pending:
        state = pending.pop()
        for previous in preds.get(state, ()):
            if previous not in seen:
                seen.add(previous)
                pending.append(previous)
    return len({pos for pos, _ in seen})