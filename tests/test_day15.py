import pytest

from aoc2024.day15 import part1, part2

SMALL_MAP = (
    "########\n#..O.O.#\n"
    "##@.O..#\n#...O..#\n"
    "#.#.O..#\n#...O..#\n"
    "#......#\n########"
)
SMALL_MOVES = "<^^>>>vv" "<v>>v<<"
SMALL = SMALL_MAP + "\n\n" + SMALL_MOVES

LARGE_MAP = (
    "##########\n#..O..O.O#\n"
    "#......O.#\n#.OO..O.O#\n"
    "#..O@..O.#\n#O#..O...#\n"
    "#O..O..O.#\n#.OO.O.OO#\n"
    "#....O...#\n##########"
)
LARGE_MOVES = "\n".join(
    [
        "<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<"
        "<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^",
        "vvv<<^>^v^^><<>>><>^<<><^vv^^<"
        ">vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v",
        "><>vv>v^v^<>><>>>><^^>vv>v<^^^"
        ">>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<",
        "<<v<^>>^^^^>>>v^<>vvv^><v<<<>^"
        "^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^",
        "^><^><>>><>^^<<^^v>>><^<v>^<vv"
        ">>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><",
        "^>><>^v<><^vvv<^^<><v<<<<<><^v"
        "<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^",
        ">^>>^v>vv>^<<^v<>><<><<v<<v><>"
        "v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^",
        "<><^^>^^^<><vvvvv^v<v<<>^v<v>v"
        "<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>",
        "^^>vv<^v^v<vv>^<><v<^v>^^^>>>^"
        "^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>",
        "v^^>>><<^^<>>^v^<v^vv<>v^<<>^<"
        "^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^",
    ]
)
LARGE = LARGE_MAP + "\n\n" + LARGE_MOVES

WIDE_SMALL = (
    "#######\n#...#.#\n"
    "#.....#\n#..OO@#\n"
    "#..O..#\n#.....#\n"
    "#######\n\n"
    "<vv<<^^<<^^"
)


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_part1_large_example():
    assert part1(LARGE) == 10092


def test_part1_box_against_wall_stays():
    assert part1("####\n#@O#\n####\n\n>") == 102


def test_part1_box_is_pushed():
    assert part1("#####\n#@O.#\n#####\n\n>") == 103


def test_part1_pushes_a_row_of_boxes():
    assert part1("######\n#@OO.#\n######\n\n>>") == 103 + 104


def test_part2_large_example():
    assert part2(LARGE) == 9021


def test_part2_small_wide_example():
    assert part2(WIDE_SMALL) == 105 + 207 + 306


def test_part2_horizontal_push():
    assert part2("#####\n#@O.#\n#####\n\n>") == 104


def test_part2_blocked_vertical_push():
    assert part2("#####\n#.#.#\n#.O.#\n#.@.#\n#####\n\n^") == 204


def test_missing_moves_is_rejected():
    with pytest.raises(ValueError):
        part1("####\n#@O#\n####\n")


def test_missing_robot_is_rejected():
    with pytest.raises(ValueError):
        part1("####\n#.O#\n####\n\n>")


def test_missing_blank_line_is_rejected():
    with pytest.raises(ValueError):
        part2("####\n#@O#\n####\n>")