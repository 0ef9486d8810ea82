"""Day 2: wrapping paper and ribbon for presents."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT = Path("data/real/input.2.txt")


def _parse_int(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class Present:
    """A box-shaped present measured in feet."""

    length: int
    width: int
    height: int

    @classmethod
    def from_text(cls, text: str) -> Present:
        """Build a present from text such as ``3x4x5``; unparsable parts are skipped."""
        dimensions = [
            value for value in map(_parse_int, text.split("x")) if value is not None
        ]
        if len(dimensions) < 3:
            raise ValueError(f"not enough dimensions in {text!r}")
        return cls(*dimensions[:3])

    def surface_area(self) -> int:
        return 2 * (
            self.length * self.width
            + self.width * self.height
            + self.length * self.height
        )

    def shortest_sides(self) -> tuple[int, int]:
        """Return the shortest and second shortest sides."""
        shortest, second, _ = sorted((self.length, self.width, self.height))
        return shortest, second

    def smallest_area(self) -> int:
        """Area of the smallest face, used as slack."""
        shortest, second = self.shortest_sides()
        return shortest * second

    def wrapping_paper(self) -> int:
        return self.surface_area() + self.smallest_area()

    def shortest_perimeter(self) -> int:
        shortest, second = self.shortest_sides()
        return 2 * (shortest + second)

    def volume(self) -> int:
        return self.length * self.width * self.height

    def ribbon(self) -> int:
        return self.shortest_perimeter() + self.volume()


def totals(lines: Iterable[str]) -> tuple[int, int]:
    """Return total wrapping paper and total ribbon for the presents described by lines."""
    paper = 0
    ribbon = 0
    for line in lines:
        present = Present.from_text(line.rstrip("\r\n"))
        paper += present.wrapping_paper()
        ribbon += present.ribbon()
    return paper, ribbon


def solve(path: str | Path = DEFAULT_INPUT) -> tuple[int, int]:
    """Solve both parts for the input file and print the answers."""
    print("Day 2")
    print("-----\n")
    with open(path) as input_file:
        paper, ribbon = totals(input_file)
    print(f"Total wrapping paper area: {paper}")
    print(f"Total ribbon length: {ribbon}")
    print("\n")
    return paper, ribbon