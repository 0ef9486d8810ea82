"""Day 5: tell naughty strings from nice ones."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

DEFAULT_INPUT = Path("data/real/input.5.txt")

_VOWELS = frozenset("aeiou")
_ILLEGAL_PAIRS = frozenset({("a", "b"), ("c", "d"), ("p", "q"), ("x", "y")})


def is_nice(candidate: str) -> bool:
    """Apply the first set of rules."""
    enough_vowels = sum(char in _VOWELS for char in candidate) >= 3
    pairs = list(zip(candidate, candidate[1:]))
    has_double = any(a == b for a, b in pairs)
    no_illegal = not any(pair in _ILLEGAL_PAIRS for pair in pairs)
    return enough_vowels and has_double and no_illegal


def is_nice2(candidate: str) -> bool:
    """Apply the second set of rules."""
    pairs = list(zip(candidate, candidate[1:]))
    repeated_pair = any(
        pair in pairs[index + 2 :] for index, pair in enumerate(pairs)
    )
    spaced_repeat = any(a == b for a, b in zip(candidate, candidate[2:]))
    return repeated_pair and spaced_repeat


def _count(lines: Iterable[str], rule) -> int:
    return sum(1 for line in lines if rule(line.rstrip("\r\n")))


def part_one(lines: Iterable[str]) -> int:
    return _count(lines, is_nice)


def part_two(lines: Iterable[str]) -> int:
    return _count(lines, is_nice2)


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int] | None:
    """Solve both parts for the input file and print the answers."""
    print("Day 5\n-----\n")
    try:
        lines = Path(path).read_text().splitlines()
    except OSError:
        print(f"The input file {path} could not be found!", file=sys.stderr)
        return None
    first = part_one(lines)
    print(f"Part 1 (count of nice strings): {first}")
    print("Reached part two")
    second = part_two(lines)
    print(f"Part 2 (count of nice strings): {second}\n")
    return first, second