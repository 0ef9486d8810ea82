"""A square grid of lights driven by instructions."""

from __future__ import annotations

import numpy as np

from aoc2015.day6.instruction import Instruction
from aoc2015.day6.operation import Operation

SIZE = 1000


class Grid:
    """A SIZE by SIZE grid of light levels, all starting at zero."""

    def __init__(self) -> None:
        self.lights = np.zeros((SIZE, SIZE), dtype=np.int64)

    def _region(self, instruction: Instruction) -> np.ndarray:
        rows = instruction.y_range()
        cols = instruction.x_range()
        for span in (rows, cols):
            if span and (span.start < 0 or span.stop > SIZE):
                raise IndexError(f"instruction {instruction} lies outside the grid")
        return self.lights[rows.start : rows.stop, cols.start : cols.stop]

    def switch(self, instruction: Instruction) -> None:
        """Turn lights on, off or toggle them."""
        region = self._region(instruction)
        operation = instruction.operation
        if operation is Operation.OFF:
            region[...] = 0
        elif operation is Operation.ON:
            region[...] = 1
        else:
            region[...] = np.where(region == 1, 0, 1)

    def dial(self, instruction: Instruction) -> None:
        """Adjust brightness: off dims by one, on adds one, toggle adds two."""
        region = self._region(instruction)
        operation = instruction.operation
        if operation is Operation.OFF:
            region[region > 0] -= 1
        elif operation is Operation.ON:
            region += 1
        else:
            region += 2

    def count_lights(self) -> int:
        """Sum of all light levels."""
        return int(self.lights.sum())