"""Validation utilities for datestr.

The functions here form the single validation gate every DateStr
passes through, whether it was built directly, parsed or produced by
arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

from datestr._internal.calendar import days_in_month
from datestr.errors import InvalidDayError, InvalidMonthError


def validate_component(name: str, value: object) -> int:
    """Check that a date component is a plain integer.

    Args:
        name: Component name used in the error message.
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        TypeError: If value is not an int (bool is rejected too).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        InvalidMonthError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidMonthError(month)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidMonthError: If month is outside 1-12.
        InvalidDayError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDayError(year, month, day, max_day)


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a valid calendar date.

    Raises:
        TypeError: If a component is not an int.
        InvalidMonthError: If month is outside 1-12.
        InvalidDayError: If day is outside the month's range.
    """
    validate_component("year", year)
    validate_component("month", month)
    validate_component("day", day)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_component",
    "validate_month",
    "validate_day",
    "validate_date",
]
