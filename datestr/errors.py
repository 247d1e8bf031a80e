"""datestr exception hierarchy.

All datestr-specific exceptions inherit from DateStrError.
"""

from __future__ import annotations


class DateStrError(Exception):
    """Base exception for all datestr errors."""

    pass


class MalformedInputError(DateStrError):
    """Text does not have the expected date layout.

    Raised by the parsers when the input cannot be split into year,
    month and day fields.

    Examples:
        - Wrong separator ("2023/07/04")
        - Wrong field width ("23-07-04")
        - Non-numeric fields ("2023-ab-04")
    """

    def __init__(self, message: str, text: object = None) -> None:
        super().__init__(message)
        self.text = text


class ValidationError(DateStrError):
    """A date component is out of range."""

    pass


class InvalidMonthError(ValidationError):
    """Month value outside 1-12."""

    def __init__(self, month: int) -> None:
        super().__init__(f"month must be between 1 and 12, got {month}")
        self.month = month


class InvalidDayError(ValidationError):
    """Day value outside the valid range for its year and month.

    The upper bound is leap-year aware, so (2023, 2, 29) is rejected
    while (2024, 2, 29) is not.
    """

    def __init__(self, year: int, month: int, day: int, max_day: int) -> None:
        super().__init__(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )
        self.year = year
        self.month = month
        self.day = day
        self.max_day = max_day


class UnsupportedTokenError(DateStrError):
    """A format spec references a field that is not recognized.

    Raised when a FormatSpec is built, never when it is applied.
    """

    def __init__(self, message: str, token: object = None) -> None:
        super().__init__(message)
        self.token = token


__all__ = [
    "DateStrError",
    "MalformedInputError",
    "ValidationError",
    "InvalidMonthError",
    "InvalidDayError",
    "UnsupportedTokenError",
]
