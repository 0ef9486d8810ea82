import pytest

from aoc2015.cli import main


def test_runs_selected_days(tmp_path, capsys):
    (tmp_path / "input.1.txt").write_text("()())")
    (tmp_path / "input.3.txt").write_text("^>v<")
    assert main(["--data-dir", str(tmp_path), "--days", "1", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Advent of Code 2015\n")
    assert "floor level: -1\nbasement position: 5" in out
    assert "Part 1: 4\nPart 2: 3" in out
    assert out.index("Day 1") < out.index("Day 3")


def test_day_five_counts(tmp_path, capsys):
    (tmp_path / "input.5.txt").write_text("ugknbfddgicrmopn\nqjhvhtzxzqqjkmpb\n")
    assert main(["--data-dir", str(tmp_path), "--days", "5"]) == 0
    out = capsys.readouterr().out
    assert "Part 1 (count of nice strings): 1" in out
    assert "Part 2 (count of nice strings): 1" in out


def test_missing_day_one_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--data-dir", str(tmp_path), "--days", "1"])


def test_unknown_day_rejected():
    with pytest.raises(SystemExit):
        main(["--days", "9"])