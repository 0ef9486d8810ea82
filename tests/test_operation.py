import pytest

from aoc2015.day6.operation import Operation


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("turn off 199,133 through 461,193", Operation.OFF),
        ("toggle 322,558 through 977,958", Operation.TOGGLE),
        ("turn on 226,196 through 599,390", Operation.ON),
    ],
)
def test_from_text(text, expected):
    assert Operation.from_text(text) is expected


def test_off_takes_precedence_over_on():
    assert Operation.from_text("on and off") is Operation.OFF


def test_unknown_text_toggles():
    assert Operation.from_text("") is Operation.TOGGLE


@pytest.mark.parametrize(
    ("text", "expected_value"),
    [
        ("turn off 0,0 through 1,1", 0),
        ("turn on 0,0 through 1,1", 1),
        ("toggle 0,0 through 1,1", 2),
    ],
)
def test_parsed_operation_values(text, expected_value):
    assert Operation.from_text(text).value == expected_value