"""Warehouse Woes: push boxes around a warehouse and score their positions."""

from __future__ import annotations

import re

Position = tuple[int, int]
Cells = dict[Position, str]

_GRID_ROW = re.compile(r"[#.O@]+")
_MOVES = re.compile(r"[<v>^\n]*")
_DIRECTIONS = {"^": (-1, 0), "v": (1, 0), ">": (0, 1), "<": (0, -1)}
_WIDE = {"#": "##", "O": "[]", "@": "@.", ".": ".."}

ROBOT = "@"
FLOOR = "."
WALL = "#"
BOX = "O"
BOX_LEFT = "["
BOX_RIGHT = "]"


def _parse(text: str) -> tuple[list[str], list[Position]]:
    """Split the input into map rows and the list of moves."""
    lines = text.splitlines()
    rows: list[str] = []
    for line in lines:
        if _GRID_ROW.fullmatch(line) is None:
            break
        rows.append(line)
    if not rows:
        raise ValueError("input holds no warehouse map")
    rest = lines[len(rows):]
    blank = 0
    while blank < len(rest) and rest[blank] == "":
        blank += 1
    if blank == 0:
        raise ValueError("the map must be followed by a blank line")
    match = _MOVES.match("\n".join(rest[blank:]))
    moves = [_DIRECTIONS[char] for char in match[0] if char != "\n"]
    if not moves:
        raise ValueError("input holds no move")
    return rows, moves


def _robot(cells: Cells) -> Position:
    robots = [pos for pos, cell in cells.items() if cell == ROBOT]
    if len(robots) != 1:
        raise ValueError(f"expected one robot, found {len(robots)}")
    return robots[0]


def _step(pos: Position, direction: Position) -> Position:
    return pos[0] + direction[0], pos[1] + direction[1]


def _gps_sum(cells: Cells, box: str) -> int:
    return sum(r * 100 + c for (r, c), cell in cells.items() if cell == box)


def part1(text: str) -> int:
    """Sum of box GPS coordinates after the robot has made every move."""
    rows, moves = _parse(text)
    cells = {(r, c): char for r, row in enumerate(rows) for c, char in enumerate(row)}
    robot = _robot(cells)
    for direction in moves:
        ahead = _step(robot, direction)
        end = ahead
        while cells.get(end) == BOX:
            end = _step(end, direction)
        if cells.get(end) != FLOOR:
            continue
        if end != ahead:
            cells[end] = BOX
        cells[robot] = FLOOR
        cells[ahead] = ROBOT
        robot = ahead
    return _gps_sum(cells, BOX)


def _push_horizontal(cells: Cells, robot: Position, direction: Position) -> Position:
    end = _step(robot, direction)
    while cells.get(end) in (BOX_LEFT, BOX_RIGHT):
        end = _step(end, direction)
    if cells.get(end) != FLOOR:
        return robot
    pos = end
    while pos != robot:
        previous = (pos[0] - direction[0], pos[1] - direction[1])
        cells[pos] = cells[previous]
        pos = previous
    cells[robot] = FLOOR
    return _step(robot, direction)


def _gather_vertical(
    cells: Cells, left: Position, right: Position, dr: int, group: set[Position]
) -> bool:
    """Collect the box halves pushed by the box at left/right; False if blocked."""
    group.update((left, right))
    above_left = (left[0] + dr, left[1])
    above_right = (right[0] + dr, right[1])
    over_left, over_right = cells.get(above_left), cells.get(above_right)
    if over_left == FLOOR and over_right == FLOOR:
        return True
    if WALL in (over_left, over_right):
        return False
    if over_left == BOX_LEFT and over_right == BOX_RIGHT:
        return _gather_vertical(cells, above_left, above_right, dr, group)
    if over_left == BOX_RIGHT and not _gather_vertical(
        cells, (above_left[0], above_left[1] - 1), above_left, dr, group
    ):
        return False
    if over_right == BOX_LEFT and not _gather_vertical(
        cells, above_right, (above_right[0], above_right[1] + 1), dr, group
    ):
        return False
    return True


def _push_vertical(cells: Cells, robot: Position, direction: Position) -> Position:
    dr = direction[0]
    ahead = _step(robot, direction)
    r, c = ahead
    group: set[Position] = set()
    if cells.get(ahead) == BOX_LEFT and cells.get((r, c + 1)) == BOX_RIGHT:
        movable = _gather_vertical(cells, ahead, (r, c + 1), dr, group)
    elif cells.get(ahead) == BOX_RIGHT and cells.get((r, c - 1)) == BOX_LEFT:
        movable = _gather_vertical(cells, (r, c - 1), ahead, dr, group)
    else:
        movable = False
    if not movable:
        return robot
    # Move the halves nearest the destination first so none is overwritten.
    for pos in sorted(group, key=lambda p: p[0], reverse=dr > 0):
        cells[_step(pos, direction)] = cells[pos]
        cells[pos] = FLOOR
    cells[ahead] = ROBOT
    cells[robot] = FLOOR
    return ahead


def part2(text: str) -> int:
    """Sum of box GPS coordinates in the doubled-width warehouse."""
    rows, moves = _parse(text)
    cells = {
        (r, c): char
        for r, row in enumerate(rows)
        for c, char in enumerate("".join(_WIDE[tile] for tile in row))
    }
    robot = _robot(cells)
    for direction in moves:
        ahead = _step(robot, direction)
        cell = cells.get(ahead)
        if cell == FLOOR:
            cells[robot] = FLOOR
            cells[ahead] = ROBOT
            robot = ahead
        elif cell in (BOX_LEFT, BOX_RIGHT):
            if direction[0] == 0:
                robot = _push_horizontal(cells, robot, direction)
            else:
                robot = _push_vertical(cells, robot, direction)
    return _gps_sum(cells, BOX_LEFT)