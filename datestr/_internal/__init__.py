"""Internal utilities for datestr.

This module contains private implementation details:
    - Calendar rules and the 30-day ordinal model
    - Validation helpers
    - Constants

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datestr._internal.calendar import (
    days_in_month,
    days_in_year,
    is_leap_year,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datestr._internal.validation import (
    validate_component,
    validate_date,
    validate_day,
    validate_month,
)

__all__: list[str] = [
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "ordinal_to_ymd",
    "ymd_to_ordinal",
    "validate_component",
    "validate_date",
    "validate_day",
    "validate_month",
]
