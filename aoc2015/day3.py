"""Day 3: count houses visited by present givers."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import cycle
from pathlib import Path

DEFAULT_INPUT = Path("data/real/input.3.txt")

Coord = tuple[int, int]

_MOVES = {"^": (0, 1), ">": (1, 0), "v": (0, -1), "<": (-1, 0)}


class Grid:
    """An unbounded grid that remembers which coordinates were marked."""

    def __init__(self) -> None:
        self._marked: set[Coord] = set()

    def mark(self, coord: Coord) -> None:
        self._marked.add(coord)

    def marks(self) -> int:
        """Number of distinct coordinates marked."""
        return len(self._marked)

    def __contains__(self, coord: object) -> bool:
        return coord in self._marked


class Giver:
    """A traveller that marks every house it visits on a shared grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.coord: Coord = (0, 0)
        grid.mark(self.coord)

    def travel(self, direction: str) -> None:
        dx, dy = _MOVES.get(direction, (0, 0))
        x, y = self.coord
        self.coord = (x + dx, y + dy)
        self.grid.mark(self.coord)


def direct(directions: str, givers: Sequence[Giver]) -> None:
    """Hand out directions to the givers in turn."""
    if directions and not givers:
        raise ValueError("no givers to direct")
    for direction, giver in zip(directions, cycle(givers)):
        giver.travel(direction)


def _visit(directions: str, giver_count: int) -> int:
    grid = Grid()
    direct(directions, [Giver(grid) for _ in range(giver_count)])
    return grid.marks()


def part_one(directions: str) -> int:
    return _visit(directions, 1)


def part_two(directions: str) -> int:
    return _visit(directions, 2)


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int] | None:
    """Solve both parts for the input file and print the answers."""
    print("Day 3\n-----\n")
    try:
        directions = Path(path).read_text()
    except OSError:
        return None
    answers = part_one(directions), part_two(directions)
    print(f"Part 1: {answers[0]}\nPart 2: {answers[1]}\n")
    return answers