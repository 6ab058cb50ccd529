import pytest

from aoc2024.day06 import part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_part1_single_cell():
    assert part1("^") == 1


def test_part2_single_cell_has_no_placement():
    assert part2("^") == 0


def test_part1_facing_right_walks_the_row():
    assert part1(">..") == 3


def test_part1_turns_at_obstacle():
    # Guard turns right at the wall and walks down two more cells.
    assert part1(">#\n..\n..") == 3


def test_part1_empty_input_raises():
    with pytest.raises(ValueError):
        part1("")


def test_part2_empty_input_raises():
    with pytest.raises(ValueError):
        part2("")