# exercise_tracker/core/utils.py

from datetime import date, datetime
from typing import Any
from ..exceptions import ValidationError


# bounds of a 32-bit INTEGER column
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date(value: Any, field: str = "date") -> date | None:
    """
    Parses an ISO calendar date (YYYY-MM-DD) or an ISO datetime, keeping the date part.
    Blank input returns None; anything else unparseable raises ValidationError.
    """
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"Invalid {field}: '{text}' (expected YYYY-MM-DD)")


def parse_duration(value: Any) -> int:
    """
    Accepts integers and integer strings such as "30".
    Fractions, booleans, free text and values too large for the store are rejected.
    """
    if is_blank(value):
        raise ValidationError("duration is required")
    if isinstance(value, bool):
        raise ValidationError(f"Invalid duration: {value!r}")
    if isinstance(value, int):
        minutes = value
    elif isinstance(value, float) and value.is_integer():
        minutes = int(value)
    else:
        try:
            minutes = int(str(value).strip())
        except ValueError:
            raise ValidationError(f"Invalid duration: '{value}' (expected a whole number)")

    if not INT_MIN <= minutes <= INT_MAX:
        raise ValidationError(f"Invalid duration: '{value}' (out of range)")
    return minutes


def parse_limit(value: Any, default: int) -> int:
    # lenient: anything that is not a positive whole number means "use the default"
    try:
        limit = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if limit <= 0:
        return default
    return min(limit, INT_MAX)


def format_date(value: date) -> str:
    """
    Renders a date as e.g. "Sun Jan 15 2023".
    Names are spelled out here so the output does not depend on the process locale.
    """
    return f"{DAY_NAMES[value.weekday()]} {MONTH_NAMES[value.month - 1]} {value.day:02d} {value.year:04d}"
