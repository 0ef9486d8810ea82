# aoc2015

Solutions to days 1 through 6 of the 2015 Advent of Code puzzles.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

The `aoc2015` command solves days 1 to 6 in turn and prints the answers:

```
aoc2015
```

Puzzle inputs are read from `input.<day>.txt` in the data directory, which
defaults to `data/real` relative to the current directory. For example, day 1
reads `data/real/input.1.txt`.

Options:

- `--data-dir DIR` reads the input files from `DIR` instead.
- `--days N [N ...]` solves only the listed days (1 to 6), in the order given.

```
aoc2015 --data-dir inputs --days 4 1
```

## Using the library

Each day is a module with a `solve(path)` function that reads the input file,
prints the answers and returns them, plus smaller functions that do the work:

```python
from aoc2015.day1 import parse_directions
from aoc2015.day2 import Present, totals
from aoc2015.day3 import part_one, part_two
from aoc2015.day4 import calculate
from aoc2015.day5 import is_nice, is_nice2

parse_directions("()())")            # (-1, 5)
Present.from_text("3x4x5").ribbon()  # 74
totals(["3x4x5"])                    # (106, 74)
part_one("^>v<")                     # 4
part_two("^>v<")                     # 3
calculate("abcdef", 5)               # 609043
is_nice("ugknbfddgicrmopn")          # True
is_nice2("qjhvhtzxzqqjkmpb")         # True
```

`aoc2015.day5` also has `part_one(lines)` and `part_two(lines)`, which count
the lines that pass each set of rules.

Day 6 lives in the `aoc2015.day6` package, with the modules `operation`,
`instruction`, `grid` and `solver`:

```python
from aoc2015.day6.instruction import Instruction
from aoc2015.day6.solver import part_one, part_two

instructions = [Instruction.from_text("turn on 0,0 through 999,999")]
part_one(instructions)  # 1000000
part_two(instructions)  # 1000000
```

`aoc2015.day6.grid.Grid` is the 1000 by 1000 light grid; its `switch` and
`dial` methods apply one instruction each, and `count_lights` sums the grid.

## What it does not do

Only days 1 to 6 are solved. There is nothing for day 7 or later, and the
package does not download puzzle inputs: they must be saved as files first.