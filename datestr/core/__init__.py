"""Core date type for datestr.

This module contains:
    - DateStr: Immutable calendar date (year, month, day)
"""

from __future__ import annotations

from datestr.core.date import DateStr

__all__: list[str] = [
    "DateStr",
]
