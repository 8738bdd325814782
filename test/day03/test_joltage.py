import pytest

from aoc2025.day03 import max_joltage, parse_banks, solve, total_joltage
from aoc2025.errors import InputError

EXAMPLE_INPUT = "\n".join([
    "987654321111111",
    "811111111111119",
    "234234234234278",
    "818181911112111",
])


def test_example():
    assert solve(EXAMPLE_INPUT) == (357, 3121910778619)


@pytest.mark.parametrize("bank,width,expected", [
    ("987654321111111", 2, 98),
    ("811111111111119", 2, 89),
    ("234234234234278", 2, 78),
    ("818181911112111", 2, 92),
    ("987654321111111", 12, 987654321111),
    ("234234234234278", 12, 434234234278),
    ("818181911112111", 12, 888911112111),
    ("12", 2, 12),
    ("5", 1, 5),
])
def test_max_joltage(bank, width, expected):
    assert max_joltage([int(ch) for ch in bank], width) == expected


def test_short_bank():
    with pytest.raises(InputError):
        max_joltage([1, 2, 3], 4)


def test_short_bank_reports_bank_number():
    with pytest.raises(InputError, match="bank 2"):
        total_joltage([[1, 2, 3], [4]], 2)


def test_invalid_character():
    with pytest.raises(InputError) as excinfo:
        parse_banks("123\n\n12a4")
    assert excinfo.value.line == 3


def test_blank_lines_skipped():
    assert parse_banks("12\n\n34\n") == [[1, 2], [3, 4]]
