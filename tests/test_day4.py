import hashlib

import pytest

from aoc2015.day4 import calculate, md5_input, solve


def test_md5_input():
    assert md5_input(609043, "abcdef") == b"abcdef609043"


def test_md5_output():
    digest = hashlib.md5(md5_input(609043, "abcdef")).hexdigest()
    assert digest[:11] == "000001dbbfa"


def test_calculate():
    assert calculate("abcdef", 5) == 609043
    assert calculate("pqrstuv", 5) == 1048970


def test_calculate_zero_zeros_is_first_number():
    assert calculate("abcdef", 0) == 1


def test_calculate_rejects_impossible_count():
    with pytest.raises(ValueError):
        calculate("abcdef", 33)


def test_solve_missing_file(tmp_path, capsys):
    assert solve(tmp_path / "missing.txt") is None
    assert "Could not calculate with input file." in capsys.readouterr().out