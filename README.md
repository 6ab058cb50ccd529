# aoc2024

Solvers for the 2024 Advent of Code puzzles, days 1 to 18. Each day lives in
its own module, `aoc2024.day01` through `aoc2024.day18`. Every solver takes the
puzzle input as a string and returns the answer. The package needs nothing
beyond the Python standard library.

## Installation

```
pip install .
```

## Usage

Most days expose `part1(text)` and `part2(text)`, each returning an `int`:

```python
from pathlib import Path

from aoc2024 import day01

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))
```

Some days take extra parameters or differ in what they offer:

| Module  | Functions                                                                  |
|---------|----------------------------------------------------------------------------|
| `day11` | `count_stones(text, blinks)`: number of stones after `blinks` blinks       |
| `day14` | `part1(text, height, width)`, `part2(text, height, width)`                 |
| `day17` | `part1(text)` only: the program's output as comma-separated values         |
| `day18` | `part1(text, width, height, count)`, `part2(text, width, height)`          |

For example:

```python
from aoc2024 import day11, day14, day18

day11.count_stones("125 17", 25)       # 55312
day14.part1(robots_text, 103, 101)     # safety factor after 100 seconds
day14.part2(robots_text, 103, 101)     # first second with no two robots together
day18.part1(bytes_text, 71, 71, 1024)  # fewest steps to the exit
day18.part2(bytes_text, 71, 71)        # "x,y" of the byte found by bisection
```

Where a solver rejects its input (missing data, a maze without start or end,
no path to the exit, an invalid opcode and the like), it raises `ValueError`.

## What the package does not do

There is no command-line tool: the package does not read input files or print
answers by itself. Call the solvers from your own code, passing the input text.
Day 17 has no second part.

## Running the tests

```
pip install ".[test]"
pytest
```