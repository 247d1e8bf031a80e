"""Coercion of loosely typed values into DateStr.

Functions:
    to_datestr: Convert a str or DateStr to a DateStr, raising on failure.
    try_to_datestr: Same, but return None when the value is not a date.

Examples:
    >>> to_datestr("2023-01-02")
    DateStr(2023, 1, 2)

    >>> try_to_datestr("2023-55-02") is None
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from datestr.errors import DateStrError

if TYPE_CHECKING:
    from datestr.core.date import DateStr

DateLike = Union["DateStr", str]


def to_datestr(value: DateLike) -> DateStr:
    """Convert a DateStr or ISO 8601 string to a DateStr.

    A DateStr is returned unchanged; a str is parsed as YYYY-MM-DD.

    Raises:
        TypeError: If value is neither a DateStr nor a str.
        MalformedInputError: If the string is not YYYY-MM-DD.
        InvalidMonthError: If the month is out of range.
        InvalidDayError: If the day is out of range.
    """
    from datestr.core.date import DateStr
    from datestr.format.iso8601 import parse_iso8601

    if isinstance(value, DateStr):
        return value
    if isinstance(value, str):
        return parse_iso8601(value)
    raise TypeError(f"expected DateStr or str, got {type(value).__name__}")


def try_to_datestr(value: DateLike) -> DateStr | None:
    """Convert like to_datestr, returning None on any datestr error.

    TypeError still propagates, since it signals a programming error
    rather than bad data.

    Examples:
        >>> try_to_datestr("2023-02-30") is None
        True
    """
    try:
        return to_datestr(value)
    except DateStrError:
        return None


__all__ = ["DateLike", "to_datestr", "try_to_datestr"]
