"""Comparison operations for DateStr.

This module provides explicit comparison functions that mirror the
operators on DateStr. Ordering is exact: dates compare as
(year, month, day) tuples and the 30-day model plays no part.

Supported Operations:
    - equal: Test equality
    - not_equal: Test inequality
    - less_than: Test less-than
    - less_equal: Test less-than-or-equal
    - greater_than: Test greater-than
    - greater_equal: Test greater-than-or-equal
    - compare: Return -1, 0 or 1
    - min_value, max_value: Find extremes
    - clamp: Constrain a date to a range
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datestr.core.date import DateStr


def _key(value: object, op: str) -> tuple[int, int, int]:
    from datestr.core.date import DateStr

    if not isinstance(value, DateStr):
        raise TypeError(
            f"{op!r} not supported for instances of {type(value).__name__!r}"
        )
    return value.to_tuple()


def equal(left: DateStr, right: DateStr) -> bool:
    """Test equality between two dates.

    Non-DateStr operands are never equal.

    Examples:
        >>> equal(DateStr(2023, 1, 15), DateStr(2023, 1, 15))
        True
        >>> equal(DateStr(2023, 1, 31), DateStr(2023, 2, 1))
        False
    """
    from datestr.core.date import DateStr

    if not isinstance(left, DateStr) or not isinstance(right, DateStr):
        return False
    return left.to_tuple() == right.to_tuple()


def not_equal(left: DateStr, right: DateStr) -> bool:
    """Test inequality between two dates."""
    return not equal(left, right)


def less_than(left: DateStr, right: DateStr) -> bool:
    """Test if left is earlier than right.

    Raises:
        TypeError: If either argument is not a DateStr.

    Examples:
        >>> less_than(DateStr(2023, 1, 15), DateStr(2023, 1, 16))
        True
    """
    return _key(left, "<") < _key(right, "<")


def less_equal(left: DateStr, right: DateStr) -> bool:
    """Test if left is earlier than or equal to right."""
    return _key(left, "<=") <= _key(right, "<=")


def greater_than(left: DateStr, right: DateStr) -> bool:
    """Test if left is later than right.

    Raises:
        TypeError: If either argument is not a DateStr.
    """
    return _key(left, ">") > _key(right, ">")


def greater_equal(left: DateStr, right: DateStr) -> bool:
    """Test if left is later than or equal to right."""
    return _key(left, ">=") >= _key(right, ">=")


def compare(left: DateStr, right: DateStr) -> int:
    """Compare two dates, returning -1, 0, or 1.

    Examples:
        >>> compare(DateStr(2023, 1, 15), DateStr(2023, 1, 16))
        -1
        >>> compare(DateStr(2023, 1, 15), DateStr(2023, 1, 15))
        0
    """
    if less_than(left, right):
        return -1
    elif greater_than(left, right):
        return 1
    return 0


def min_value(*values: DateStr) -> DateStr:
    """Return the earliest of the given dates.

    Raises:
        ValueError: If no values provided.
        TypeError: If a value is not a DateStr.

    Examples:
        >>> min_value(DateStr(2023, 1, 20), DateStr(2023, 1, 15))
        DateStr(2023, 1, 15)
    """
    if not values:
        raise ValueError("min_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if less_than(value, result):
            result = value
    return result


def max_value(*values: DateStr) -> DateStr:
    """Return the latest of the given dates.

    Raises:
        ValueError: If no values provided.
        TypeError: If a value is not a DateStr.
    """
    if not values:
        raise ValueError("max_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if greater_than(value, result):
            result = value
    return result


def clamp(value: DateStr, min_val: DateStr, max_val: DateStr) -> DateStr:
    """Clamp a date to the range [min_val, max_val].

    Raises:
        ValueError: If min_val is later than max_val.

    Examples:
        >>> low, high = DateStr(2023, 1, 10), DateStr(2023, 1, 20)
        >>> clamp(DateStr(2023, 1, 5), low, high)
        DateStr(2023, 1, 10)
    """
    if greater_than(min_val, max_val):
        raise ValueError("min_val must be less than or equal to max_val")

    if less_than(value, min_val):
        return min_val
    elif greater_than(value, max_val):
        return max_val
    return value


__all__ = [
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
