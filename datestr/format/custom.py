"""Custom-layout formatting and parsing.

to_custom renders a DateStr through a FormatSpec. parse_custom is the
reverse direction; it is kept apart from the ISO 8601 parser so that
DateStr.from_string never accepts anything but YYYY-MM-DD.

Examples:
    >>> from datestr.format.spec import FormatSpec
    >>> spec = FormatSpec.from_pattern("DD/MM/YYYY")

    >>> to_custom(DateStr(2023, 7, 4), spec)
    '04/07/2023'

    >>> parse_custom("04/07/2023", spec)
    DateStr(2023, 7, 4)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from datestr.errors import MalformedInputError, UnsupportedTokenError
from datestr.format.iso8601 import format_year
from datestr.format.spec import Field, FormatSpec

if TYPE_CHECKING:
    from datestr.core.date import DateStr

logger = logging.getLogger(__name__)

# Regex fragments used when parsing each field
_PARSE_PATTERNS: dict[Field, str] = {
    Field.YEAR: r"(?P<year>[0-9]{4})",
    Field.MONTH: r"(?P<month>[0-9]{2})",
    Field.DAY: r"(?P<day>[0-9]{2})",
}


def to_custom(value: DateStr, spec: FormatSpec) -> str:
    """Format a DateStr using a FormatSpec.

    Literals are copied verbatim; fields are zero padded (year to at
    least 4 digits, month and day to 2).

    Raises:
        TypeError: If value is not a DateStr or spec is not a FormatSpec.

    Examples:
        >>> to_custom(DateStr(2022, 12, 28), FormatSpec.from_pattern("YYYYMMDD"))
        '20221228'
    """
    from datestr.core.date import DateStr

    if not isinstance(value, DateStr):
        raise TypeError(f"expected DateStr, got {type(value).__name__}")
    if not isinstance(spec, FormatSpec):
        raise TypeError(f"expected FormatSpec, got {type(spec).__name__}")

    result = []
    for item in spec:
        if item is Field.YEAR:
            result.append(format_year(value.year))
        elif item is Field.MONTH:
            result.append(f"{value.month:02d}")
        elif item is Field.DAY:
            result.append(f"{value.day:02d}")
        else:
            result.append(item.text)

    return "".join(result)


def parse_custom(text: str, spec: FormatSpec) -> DateStr:
    """Parse text laid out according to a FormatSpec.

    YYYY matches exactly 4 digits, MM and DD exactly 2, and literals
    match themselves. The spec must name each field exactly once.

    Raises:
        UnsupportedTokenError: If the spec lacks a field or repeats one.
        MalformedInputError: If text does not match the spec.
        InvalidMonthError: If the month is outside 1-12.
        InvalidDayError: If the day is outside the month's range.

    Examples:
        >>> parse_custom("2023.07.04", FormatSpec.from_pattern("YYYY.MM.DD"))
        DateStr(2023, 7, 4)
    """
    from datestr.core.date import DateStr

    if not isinstance(spec, FormatSpec):
        raise TypeError(f"expected FormatSpec, got {type(spec).__name__}")
    if not isinstance(text, str):
        raise MalformedInputError(
            f"expected str, got {type(text).__name__}", text=text
        )

    pattern = _spec_to_regex(spec)
    match = pattern.fullmatch(text)
    if not match:
        logger.debug("rejected input %r for format %r", text, spec.pattern)
        raise MalformedInputError(
            f"string {text!r} does not match format {spec.pattern!r}", text=text
        )

    return DateStr(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
    )


def _spec_to_regex(spec: FormatSpec) -> re.Pattern[str]:
    """Build the regex matching a spec's layout.

    Raises:
        UnsupportedTokenError: If the spec cannot be parsed unambiguously.
    """
    fields = spec.fields
    for field in Field:
        count = fields.count(field)
        if count != 1:
            raise UnsupportedTokenError(
                f"parsing requires {field.value} exactly once in "
                f"{spec.pattern!r}, found {count}",
                token=field,
            )

    parts = []
    for item in spec:
        if isinstance(item, Field):
            parts.append(_PARSE_PATTERNS[item])
        else:
            parts.append(re.escape(item.text))
    return re.compile("".join(parts))


__all__ = ["to_custom", "parse_custom"]
