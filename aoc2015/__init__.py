"""Solutions to days 1 through 6 of the 2015 Advent of Code puzzles."""

__version__ = "0.1.0"