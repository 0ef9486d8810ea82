"""Day 1: follow Santa's floor directions."""

from __future__ import annotations

from pathlib import Path

DEFAULT_INPUT = Path("data/real/input.1.txt")


def parse_directions(directions: str) -> tuple[int, int]:
    """Return the final floor and the 1-based position where the basement is first entered.

    The position is 0 if the basement is never reached.
    """
    floor = 0
    basement_position = 0
    for position, direction in enumerate(directions, start=1):
        if direction == "(":
            floor += 1
        elif direction == ")":
            floor -= 1
        if not basement_position and floor == -1:
            basement_position = position
    return floor, basement_position


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    print("Day 1")
    print("-----\n")
    directions = Path(path).read_text()
    floor, basement_position = parse_directions(directions)
    print(f"floor level: {floor}\nbasement position: {basement_position}")
    print("\n")
    return floor, basement_position