"""datestr: parse, validate, format and compare calendar dates.

datestr stores a calendar date as a validated, immutable value, reads
it from ISO 8601 text (YYYY-MM-DD), and writes it back either as ISO
8601 or through a custom layout.

Day arithmetic deliberately treats every month as 30 days long and
every year as 360 days. Results therefore differ from real calendar
arithmetic, e.g. DateStr(2023, 1, 15) + 40 is 2023-02-25, not
2023-02-24. Ordering is exact.

Core Types:
    DateStr: Calendar date (year, month, day)
    FormatSpec: Validated custom text layout
    Field, Literal: Items of a FormatSpec

Functions:
    parse_iso8601 / from_string: Parse YYYY-MM-DD
    format_iso8601 / to_iso8601: Format as YYYY-MM-DD
    to_custom: Format with a FormatSpec
    parse_custom: Parse with a FormatSpec
    add_days, subtract_days, difference: 30-day model arithmetic
    to_datestr, try_to_datestr: Coerce strings to DateStr
    is_leap_year, days_in_month: Calendar rules

Exceptions:
    DateStrError: Base exception
    MalformedInputError: Text does not match the layout
    ValidationError: Out-of-range component
    InvalidMonthError: Month outside 1-12
    InvalidDayError: Day outside the month
    UnsupportedTokenError: Unknown format field

Example:
    >>> from datestr import DateStr, FormatSpec
    >>> d = DateStr.from_string("2023-07-04")
    >>> d.format(FormatSpec.from_pattern("DD/MM/YYYY"))
    '04/07/2023'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datestr.core.date import DateStr
from datestr.format.spec import Field, FormatSpec, Literal

# Calendar rules
from datestr._internal.calendar import days_in_month, is_leap_year

# Exceptions
from datestr.errors import (
    DateStrError,
    InvalidDayError,
    InvalidMonthError,
    MalformedInputError,
    UnsupportedTokenError,
    ValidationError,
)

# Format functions
from datestr.format import (
    format_iso8601,
    from_string,
    parse_custom,
    parse_iso8601,
    to_custom,
    to_iso8601,
)

# Arithmetic
from datestr.arithmetic import add_days, difference, subtract_days

# Conversion
from datestr.convert import to_datestr, try_to_datestr

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateStr",
    "FormatSpec",
    "Field",
    "Literal",
    # Calendar rules
    "is_leap_year",
    "days_in_month",
    # Exceptions
    "DateStrError",
    "MalformedInputError",
    "ValidationError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnsupportedTokenError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    "from_string",
    "to_iso8601",
    "to_custom",
    "parse_custom",
    # Arithmetic
    "add_days",
    "subtract_days",
    "difference",
    # Conversion
    "to_datestr",
    "try_to_datestr",
]
