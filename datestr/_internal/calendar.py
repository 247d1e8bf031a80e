"""Calendar utilities for datestr.

This module provides two independent sets of functions:

- Gregorian rules (leap years, month lengths) used to validate a date
  when it is built.
- The 30-day ordinal model used for date arithmetic. Every month counts
  as 30 days and every year as 360, so arithmetic results diverge from
  the real calendar. This divergence is intentional and must be kept.

This module is not part of the public API.
"""

from __future__ import annotations

from datestr._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)
from datestr.errors import InvalidMonthError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        InvalidMonthError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise InvalidMonthError(month)

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Flatten year, month, day to an ordinal under the 30-day model.

    ordinal = year * 360 + (month - 1) * 30 + (day - 1)

    Day 31 of a month yields the same ordinal as day 1 of the next one.

    Examples:
        >>> ymd_to_ordinal(2023, 1, 15)
        728294
        >>> ymd_to_ordinal(0, 1, 1)
        0
    """
    return year * DAYS_PER_YEAR + (month - 1) * DAYS_PER_MONTH + (day - 1)


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Invert ymd_to_ordinal.

    Python's // and % floor toward negative infinity, so negative
    ordinals map to negative years with month and day still in range.

    Examples:
        >>> ordinal_to_ymd(728334)
        (2023, 2, 25)
        >>> ordinal_to_ymd(-1)
        (-1, 12, 30)
    """
    day = ordinal % DAYS_PER_MONTH + 1
    month = (ordinal // DAYS_PER_MONTH) % MONTHS_PER_YEAR + 1
    year = ordinal // DAYS_PER_YEAR
    return (year, month, day)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
]
