"""Command line entry point that runs each day's solution."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc2015 import day1, day2, day3, day4, day5
from aoc2015.day6 import solver as day6

_SOLVERS: dict[int, Callable[[Path], object]] = {
    1: day1.solve,
    2: day2.solve,
    3: day3.solve,
    4: day4.solve,
    5: day5.solve,
    6: day6.solve,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve Advent of Code 2015 puzzles.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data/real"),
        help="directory holding input.<day>.txt files",
    )
    parser.add_argument(
        "--days",
        type=int,
        nargs="+",
        choices=sorted(_SOLVERS),
        default=sorted(_SOLVERS),
        help="days to solve, in the given order",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected days' solutions and print their answers."""
    args = _parser().parse_args(argv)
    print("Advent of Code 2015")
    print("===================\n")
    for day in args.days:
        _SOLVERS[day](args.data_dir / f"input.{day}.txt")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())