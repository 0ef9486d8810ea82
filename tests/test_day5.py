import pytest

from aoc2015.day5 import is_nice, is_nice2, part_one, part_two, solve


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("ugknbfddgicrmopn", True),
        ("aaa", True),
        ("jchzalrnumimnmhp", False),
        ("haegwjzuvuyypxyu", False),
        ("dvszwmarrgswjxmb", False),
    ],
)
def test_is_nice(candidate, expected):
    assert is_nice(candidate) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("qjhvhtzxzqqjkmpb", True),
        ("xxyxx", True),
        ("uurcxstgmygtbstg", False),
        ("ieodomkazucvgmuy", False),
    ],
)
def test_is_nice2(candidate, expected):
    assert is_nice2(candidate) is expected


def test_is_nice2_overlapping_pair_does_not_count():
    assert is_nice2("aaa") is False
    assert is_nice2("aaaa") is True


def test_part_one_counts_lines():
    lines = ["ugknbfddgicrmopn\n", "aaa\n", "jchzalrnumimnmhp\n"]
    assert part_one(lines) == 2


def test_part_two_counts_lines():
    lines = ["qjhvhtzxzqqjkmpb", "xxyxx", "uurcxstgmygtbstg"]
    assert part_two(lines) == 2


def test_solve(tmp_path, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text("ugknbfddgicrmopn\nqjhvhtzxzqqjkmpb\nxxyxx\n")
    assert solve(input_file) == (1, 2)
    out = capsys.readouterr().out
    assert "Part 1 (count of nice strings): 1" in out
    assert "Part 2 (count of nice strings): 2" in out


def test_solve_missing_file(tmp_path, capsys):
    assert solve(tmp_path / "missing.txt") is None
    assert "could not be found" in capsys.readouterr().err