"""Solvers for the 2024 Advent of Code puzzles, one module per day from 1 to 18."""

__version__ = "0.1.0"
__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
    "day12",
    "day13",
    "day14",
    "day15",
    "day16",
    "day17",
    "day18",
]