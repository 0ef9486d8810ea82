"""Parsing of light-grid instructions."""

from __future__ import annotations

import re
from dataclasses import dataclass

from aoc2015.day6.operation import Operation

_NUMBER = re.compile(r"\d+")

Coord = tuple[int, int]


@dataclass(frozen=True)
class Instruction:
    """An operation applied to the rectangle from origin to end, inclusive."""

    opcode: Operation
    origin: Coord
    end: Coord

    @classmethod
    def from_text(cls, text: str) -> Instruction:
        """Parse a line such as ``turn on 0,0 through 999,999``."""
        numbers = [int(match) for match in _NUMBER.findall(text)]
        if len(numbers) < 4:
            raise ValueError(f"expected four coordinates in {text!r}")
        return cls(
            opcode=Operation.from_text(text),
            origin=(numbers[0], numbers[1]),
            end=(numbers[2], numbers[3]),
        )

    @property
    def operation(self) -> Operation:
        return self.opcode

    def x_range(self) -> range:
        """Columns covered, taken from the second coordinate."""
        return range(self.origin[1], self.end[1] + 1)

    def y_range(self) -> range:
        """Rows covered, taken from the first coordinate."""
        return range(self.origin[0], self.end[0] + 1)