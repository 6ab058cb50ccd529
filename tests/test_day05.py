import pytest

from aoc2024.day05 import part1, part2

SAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


def test_part1_sample():
    assert part1(SAMPLE) == 143


def test_part2_sample():
    assert part2(SAMPLE) == 123


def test_single_page_update_is_ordered():
    data = "1|2\n\n7"
    assert part1(data) == 7
    assert part2(data) == 0


def test_reordering_a_pair():
    data = "1|2\n2|3\n1|3\n\n3,2,1"
    assert part1(data) == 0
    assert part2(data) == 2


def test_missing_rules_raise():
    with pytest.raises(ValueError):
        part1("1,2,3")


def test_missing_updates_raise():
    with pytest.raises(ValueError):
        part2("1|2\n")