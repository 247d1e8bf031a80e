"""Date arithmetic and comparison.

The functions in this module are the canonical implementations behind
the operators on DateStr.

Arithmetic Operations (from datestr.arithmetic.ops), 30-day model:
    - add_days: Move a date forward
    - subtract_days: Move a date back
    - difference: Day count between two dates

Comparison Operations (from datestr.arithmetic.comparisons), exact:
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from datestr.arithmetic.ops import (
    add_days,
    subtract_days,
    difference,
)
from datestr.arithmetic.comparisons import (
    equal,
    not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
    min_value,
    max_value,
    clamp,
)

__all__ = [
    # Arithmetic operations
    "add_days",
    "subtract_days",
    "difference",
    # Comparison operations
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
