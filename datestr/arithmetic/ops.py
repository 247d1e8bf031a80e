"""Day-count arithmetic for DateStr.

All arithmetic uses the 30-day model: a date is flattened to

    ordinal = year * 360 + (month - 1) * 30 + (day - 1)

the day count is applied to the ordinal, and the result is turned back
into (year, month, day) with floor division. Month lengths of the real
calendar are ignored, so results drift from calendar arithmetic:

    >>> add_days(DateStr(2023, 1, 15), 40)  # calendar: 2023-02-24
    DateStr(2023, 2, 25)

Two consequences follow from the model:

- Day 31 shares its ordinal with day 1 of the next month, so
  difference(DateStr(2023, 2, 1), DateStr(2023, 1, 31)) is 0.
- A result can land on February 29 of a common year or on February 30.
  Such results go through the normal validation and raise
  InvalidDayError.

Supported Operations:
    - add_days: Move a date forward by a number of days
    - subtract_days: Move a date back by a number of days
    - difference: Day count between two dates
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datestr._internal.calendar import ordinal_to_ymd

if TYPE_CHECKING:
    from datestr.core.date import DateStr


def _check_days(days: object) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"days must be int, got {type(days).__name__}")
    return days


def _check_date(value: object) -> DateStr:
    from datestr.core.date import DateStr

    if not isinstance(value, DateStr):
        raise TypeError(f"expected DateStr, got {type(value).__name__}")
    return value


def add_days(value: DateStr, days: int) -> DateStr:
    """Add a number of days to a date under the 30-day model.

    Args:
        value: The starting date.
        days: Number of days to add (can be negative).

    Returns:
        A new DateStr.

    Raises:
        TypeError: If value is not a DateStr or days is not an int.
        InvalidDayError: If the result is a day the calendar lacks.

    Examples:
        >>> add_days(DateStr(2023, 12, 30), 1)
        DateStr(2024, 1, 1)

        >>> add_days(DateStr(2023, 1, 1), -1)
        DateStr(2022, 12, 30)
    """
    from datestr.core.date import DateStr

    value = _check_date(value)
    days = _check_days(days)

    year, month, day = ordinal_to_ymd(value.to_ordinal() + days)
    return DateStr(year, month, day)


def subtract_days(value: DateStr, days: int) -> DateStr:
    """Subtract a number of days from a date under the 30-day model.

    Examples:
        >>> subtract_days(DateStr(2024, 1, 1), 1)
        DateStr(2023, 12, 30)
    """
    return add_days(value, -_check_days(days))


def difference(left: DateStr, right: DateStr) -> int:
    """Return left - right in days under the 30-day model.

    The result satisfies add_days(right, difference(left, right)) == left
    whenever left.day is not 31.

    Raises:
        TypeError: If either argument is not a DateStr.

    Examples:
        >>> difference(DateStr(2024, 1, 1), DateStr(2023, 1, 1))
        360
        >>> difference(DateStr(2023, 3, 1), DateStr(2023, 2, 1))
        30
    """
    left = _check_date(left)
    right = _check_date(right)
    return left.to_ordinal() - right.to_ordinal()


__all__ = [
    "add_days",
    "subtract_days",
    "difference",
]
