"""Internal constants for datestr.

These constants define the calendar tables and the fixed sizes of the
30-day arithmetic model. This module is not part of the public API.
"""

from __future__ import annotations

import re

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Arithmetic model: every month has 30 days, every year 360
DAYS_PER_MONTH: int = 30
MONTHS_PER_YEAR: int = 12
DAYS_PER_YEAR: int = DAYS_PER_MONTH * MONTHS_PER_YEAR  # 360

# Minimum width of a rendered year (zero padded, never truncated)
YEAR_WIDTH: int = 4

# YYYY-MM-DD, ASCII digits only
ISO8601_DATE_PATTERN: re.Pattern[str] = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
)


__all__ = [
    "DAYS_IN_MONTH",
    "DAYS_PER_MONTH",
    "MONTHS_PER_YEAR",
    "DAYS_PER_YEAR",
    "YEAR_WIDTH",
    "ISO8601_DATE_PATTERN",
]
