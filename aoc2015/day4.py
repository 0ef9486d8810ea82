"""Day 4: mine AdventCoins by searching for MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
from itertools import count
from pathlib import Path

DEFAULT_INPUT = Path("data/real/input.4.txt")

_HEX_DIGITS = 32


def md5_input(number: int, key: str) -> bytes:
    """Return the bytes hashed for a candidate number."""
    return f"{key}{number}".encode()


def calculate(key: str, num_zeros: int) -> int:
    """Return the lowest positive number whose hash starts with num_zeros zeros."""
    if not 0 <= num_zeros <= _HEX_DIGITS:
        raise ValueError(f"num_zeros must be between 0 and {_HEX_DIGITS}")
    target = "0" * num_zeros
    for number in count(1):
        if hashlib.md5(md5_input(number, key)).hexdigest().startswith(target):
            return number
    raise AssertionError("unreachable")


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int] | None:
    """Solve both parts for the key in the input file and print the answers."""
    print("Day 4\n-----\n")
    try:
        key = Path(path).read_text()
    except OSError:
        print("Could not calculate with input file.")
        return None
    five = calculate(key, 5)
    print(f"five zeros: {five}")
    six = calculate(key, 6)
    print(f"six zeros: {six}\n")
    return five, six