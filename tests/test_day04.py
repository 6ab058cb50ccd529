import pytest

from aoc2024.day04 import part1, part2

SAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""


def test_part1_sample():
    assert part1(SAMPLE) == 18


def test_part2_sample():
    assert part2(SAMPLE) == 9


def test_part1_forward_and_backward():
    assert part1("XMASAMX") == 2


def test_part1_vertical():
    assert part1("X\nM\nA\nS") == 1


def test_part2_single_cross():
    assert part2("M.S\n.A.\nM.S") == 1


def test_part2_same_letters_on_diagonal_do_not_count():
    assert part2("M.M\n.A.\nM.M") == 0


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        part1("XMAS\nXM")