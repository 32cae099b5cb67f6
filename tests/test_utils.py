# tests/test_utils.py

from datetime import date
import pytest
from exercise_tracker.core.utils import format_date, parse_date, parse_duration, parse_limit
from exercise_tracker.exceptions import ValidationError


@pytest.mark.parametrize("day, expected", [
    (date(2023, 1, 15), "Sun Jan 15 2023"),
    (date(2024, 1, 1), "Mon Jan 01 2024"),
    (date(2024, 2, 29), "Thu Feb 29 2024"),
])
def test_format_date(day, expected):
    assert format_date(day) == expected


def test_parse_date():
    assert parse_date("2023-01-15") == date(2023, 1, 15)
    assert parse_date(" 2023-01-15 ") == date(2023, 1, 15)
    assert parse_date("2023-01-15T23:59:59") == date(2023, 1, 15)
    assert parse_date(None) is None
    assert parse_date("") is None


def test_parse_date_names_the_field():
    with pytest.raises(ValidationError, match="from"):
        parse_date("15/01/2023", "from")


def test_parse_duration():
    assert parse_duration(30) == 30
    assert parse_duration("30") == 30
    assert parse_duration(30.0) == 30
    for bad in ("thirty", "30.5", "", None, True, "9" * 25, 2 ** 31, 1e30):
        with pytest.raises(ValidationError):
            parse_duration(bad)


def test_parse_limit():
    assert parse_limit("5", 500) == 5
    assert parse_limit(None, 500) == 500
    assert parse_limit("abc", 500) == 500
    assert parse_limit("0", 500) == 500
    assert parse_limit("-1", 500) == 500
    assert parse_limit("1" + "0" * 20, 500) == 2 ** 31 - 1
