"""Day 6: set up the light display."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

from aoc2015.day6.grid import Grid
from aoc2015.day6.instruction import Instruction

DEFAULT_INPUT = Path("data/real/input.6.txt")


def part_one(instructions: Iterable[Instruction]) -> int:
    """Count lights lit after switching by every instruction."""
    grid = Grid()
    for instruction in instructions:
        grid.switch(instruction)
    return grid.count_lights()


def part_two(instructions: Iterable[Instruction]) -> int:
    """Total brightness after dialling by every instruction."""
    grid = Grid()
    for instruction in instructions:
        grid.dial(instruction)
    return grid.count_lights()


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int] | None:
    """Solve both parts for the input file and print the answers."""
    print("Day 6\n-----\n")
    try:
        text = Path(path).read_text()
    except OSError:
        print("Could not open input 6!", file=sys.stderr)
        return None
    instructions = [Instruction.from_text(line) for line in text.splitlines()]
    first = part_one(instructions)
    print(f"Part 1: {first}")
    second = part_two(instructions)
    print(f"Part 2: {second}")
    return first, second