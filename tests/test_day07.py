import pytest

from aoc2024.day07 import part1, part2

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_single_value_matches_itself():
    assert part1("10: 10") == 10


def test_addition_only():
    assert part1("5: 2 3") == 5


def test_concatenation_needs_part2():
    assert part1("123: 12 3") == 0
    assert part2("123: 12 3") == 123


def test_unreachable_target():
    assert part2("7: 2 2") == 0


def test_no_equation_raises():
    with pytest.raises(ValueError):
        part1("not an equation")