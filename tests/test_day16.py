import pytest

from aoc2024.day16 import part1, part2

EXAMPLE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SECOND_EXAMPLE = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""


def test_part1_example():
    assert part1(EXAMPLE) == 7036


def test_part2_example():
    assert part2(EXAMPLE) == 45


def test_part1_second_example():
    assert part1(SECOND_EXAMPLE) == 11048


def test_part2_second_example():
    assert part2(SECOND_EXAMPLE) == 64


def test_straight_corridor_east():
    maze = "#####\n#S.E#\n#####"
    assert part1(maze) == 2
    assert part2(maze) == 3


def test_corridor_needs_turning_around():
    maze = "#####\n#E.S#\n#####"
    assert part1(maze) == 2002
    assert part2(maze) == 3


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part1("#####\n#..E#\n#####")


def test_missing_end_raises():
    with pytest.raises(ValueError):
        part2("#####\n#S..#\n#####")


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        part1("#####\n#S#E#\n#####")