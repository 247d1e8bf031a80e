"""ISO 8601 formatting and parsing.

This module provides the default text layout for DateStr:

    YYYY-MM-DD

Parsing accepts exactly that shape: a 4-digit year, a 2-digit month and
a 2-digit day, separated by hyphens, using ASCII digits. Signed or
extended years, other separators and surrounding whitespace are
rejected with MalformedInputError.

Formatting pads the year to at least 4 digits and never truncates it,
so years outside 0-9999 format fine but cannot be parsed back.

Examples:
    >>> from datestr.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2023-07-04")
    DateStr(2023, 7, 4)

    >>> format_iso8601(DateStr(2023, 7, 4))
    '2023-07-04'
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from datestr._internal.constants import ISO8601_DATE_PATTERN, YEAR_WIDTH
from datestr.errors import MalformedInputError

if TYPE_CHECKING:
    from datestr.core.date import DateStr

logger = logging.getLogger(__name__)


def parse_iso8601(text: str) -> DateStr:
    """Parse a YYYY-MM-DD string into a DateStr.

    Args:
        text: The ISO 8601 calendar date to parse.

    Returns:
        The parsed DateStr.

    Raises:
        MalformedInputError: If text is not a str of shape YYYY-MM-DD.
        InvalidMonthError: If the month is outside 1-12.
        InvalidDayError: If the day is outside the month's range.

    Examples:
        >>> parse_iso8601("2024-02-29")
        DateStr(2024, 2, 29)

        >>> parse_iso8601("2023/07/04")
        Traceback (most recent call last):
        ...
        MalformedInputError: invalid ISO 8601 date: '2023/07/04'. Expected YYYY-MM-DD
    """
    from datestr.core.date import DateStr

    if not isinstance(text, str):
        raise MalformedInputError(
            f"expected str, got {type(text).__name__}", text=text
        )

    match = ISO8601_DATE_PATTERN.fullmatch(text)
    if not match:
        logger.debug("rejected ISO 8601 input %r", text)
        raise MalformedInputError(
            f"invalid ISO 8601 date: {text!r}. Expected YYYY-MM-DD", text=text
        )

    year, month, day = (int(group) for group in match.groups())
    return DateStr(year, month, day)


def format_year(year: int) -> str:
    """Render a year zero padded to at least 4 digits.

    Negative years keep their sign ahead of the padded digits.

    Examples:
        >>> format_year(7)
        '0007'
        >>> format_year(12345)
        '12345'
        >>> format_year(-44)
        '-0044'
    """
    if year < 0:
        return f"-{-year:0{YEAR_WIDTH}d}"
    return f"{year:0{YEAR_WIDTH}d}"


def format_iso8601(value: DateStr) -> str:
    """Format a DateStr as YYYY-MM-DD.

    Raises:
        TypeError: If value is not a DateStr.

    Examples:
        >>> format_iso8601(DateStr(2023, 1, 5))
        '2023-01-05'
        >>> format_iso8601(DateStr(-44, 3, 15))
        '-0044-03-15'
    """
    from datestr.core.date import DateStr

    if not isinstance(value, DateStr):
        raise TypeError(f"expected DateStr, got {type(value).__name__}")

    return f"{format_year(value.year)}-{value.month:02d}-{value.day:02d}"


# Aliases matching the to_* / from_* naming of the public API
to_iso8601 = format_iso8601
from_string = parse_iso8601


__all__ = [
    "parse_iso8601",
    "format_iso8601",
    "format_year",
    "to_iso8601",
    "from_string",
]
