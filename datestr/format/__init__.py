"""Date formatting and parsing.

This module provides functions for converting DateStr values to and from
text:
    - ISO 8601 (YYYY-MM-DD) formatting and parsing
    - Custom layouts described by a FormatSpec

Functions:
    parse_iso8601: Parse a YYYY-MM-DD string.
    format_iso8601: Format a DateStr as YYYY-MM-DD.
    to_custom: Format a DateStr with a FormatSpec.
    parse_custom: Parse a string laid out by a FormatSpec.

Examples:
    >>> from datestr.format import FormatSpec, parse_iso8601, to_custom

    >>> d = parse_iso8601("2023-07-04")
    >>> to_custom(d, FormatSpec.from_pattern("DD/MM/YYYY"))
    '04/07/2023'
"""

from __future__ import annotations

from datestr.format.custom import parse_custom, to_custom
from datestr.format.iso8601 import (
    format_iso8601,
    format_year,
    from_string,
    parse_iso8601,
    to_iso8601,
)
from datestr.format.spec import Field, FormatSpec, Literal

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    "from_string",
    "to_iso8601",
    "format_year",
    # Custom layouts
    "Field",
    "Literal",
    "FormatSpec",
    "to_custom",
    "parse_custom",
]
