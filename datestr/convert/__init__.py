"""Conversion helpers for DateStr.

Functions:
    to_datestr: Convert a str or DateStr to a DateStr.
    try_to_datestr: Convert, returning None on invalid input.
"""

from __future__ import annotations

from datestr.convert.coerce import DateLike, to_datestr, try_to_datestr

__all__: list[str] = [
    "DateLike",
    "to_datestr",
    "try_to_datestr",
]
