"""DateStr class representing a calendar date.

This module provides the DateStr class, an immutable (year, month, day)
value validated against the proleptic Gregorian calendar.

Arithmetic on DateStr uses a simplified model where every month has 30
days. Adding or subtracting days therefore gives different answers from
a real calendar:

    >>> DateStr(2023, 1, 15) + 40   # a real calendar gives 2023-02-24
    DateStr(2023, 2, 25)

Ordering is exact and compares (year, month, day) directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from datestr._internal.calendar import (
    is_leap_year,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from datestr._internal.validation import validate_date

if TYPE_CHECKING:
    from datestr.format.spec import FormatSpec


class DateStr:
    """A calendar date in the proleptic Gregorian calendar.

    DateStr represents a specific calendar day with year, month, and day
    components. Components are validated on construction and never
    change afterwards; arithmetic returns new instances.

    Attributes:
        year: The year (any integer, including zero and negatives).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = DateStr(2023, 7, 4)
        >>> d.year, d.month, d.day
        (2023, 7, 4)

        >>> DateStr(2024, 2, 29)  # Valid leap year date
        DateStr(2024, 2, 29)

        >>> str(DateStr(2023, 7, 4))
        '2023-07-04'
    """

    __slots__ = ("_year", "_month", "_day", "_ordinal")

    _year: int
    _month: int
    _day: int
    _ordinal: int

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a DateStr from year, month, and day.

        Raises:
            TypeError: If a component is not an int.
            InvalidMonthError: If month is outside 1-12.
            InvalidDayError: If day is outside the month's range.

        Examples:
            >>> DateStr(2023, 2, 29)  # 2023 is not a leap year
            Traceback (most recent call last):
            ...
            InvalidDayError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_date(year, month, day)

        object.__setattr__(self, "_year", year)
        object.__setattr__(self, "_month", month)
        object.__setattr__(self, "_day", day)
        object.__setattr__(self, "_ordinal", ymd_to_ordinal(year, month, day))

    @classmethod
    def from_parts(cls, year: int, month: int, day: int) -> DateStr:
        """Create a DateStr from its components.

        Equivalent to calling the constructor directly.

        Examples:
            >>> DateStr.from_parts(2024, 2, 29)
            DateStr(2024, 2, 29)
        """
        return cls(year, month, day)

    @classmethod
    def from_string(cls, text: str) -> DateStr:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        The text must be exactly a 4-digit year, 2-digit month and
        2-digit day separated by hyphens. Signs, extended years and
        surrounding whitespace are rejected.

        Raises:
            MalformedInputError: If the text is not YYYY-MM-DD.
            InvalidMonthError: If the month is out of range.
            InvalidDayError: If the day is out of range.

        Examples:
            >>> DateStr.from_string("2023-07-04")
            DateStr(2023, 7, 4)
        """
        from datestr.format.iso8601 import parse_iso8601

        return parse_iso8601(text)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> DateStr:
        """Create a DateStr from a 30-day model ordinal.

        Raises:
            InvalidDayError: If the ordinal falls on a day the real
                calendar does not have (Feb 29 in a common year, Feb 30).

        Examples:
            >>> DateStr.from_ordinal(728294)
            DateStr(2023, 1, 15)
        """
        year, month, day = ordinal_to_ymd(ordinal)
        return cls(year, month, day)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> DateStr(2024, 1, 1).is_leap_year
            True
            >>> DateStr(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self._year, self._month, self._day)

    def to_ordinal(self) -> int:
        """Return the ordinal under the 30-day model.

        Examples:
            >>> DateStr(2023, 1, 15).to_ordinal()
            728294
        """
        return self._ordinal

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> DateStr:
        """Return a new DateStr with specified components replaced.

        Raises:
            InvalidMonthError: If the resulting month is invalid.
            InvalidDayError: If the resulting day is invalid.

        Examples:
            >>> DateStr(2023, 7, 4).replace(month=12)
            DateStr(2023, 12, 4)
        """
        return DateStr(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def add_days(self, days: int) -> DateStr:
        """Return a new DateStr offset by the given number of days.

        Uses the 30-day model; see datestr.arithmetic.ops.add_days.

        Examples:
            >>> DateStr(2023, 1, 15).add_days(40)
            DateStr(2023, 2, 25)
        """
        from datestr.arithmetic.ops import add_days

        return add_days(self, days)

    def subtract_days(self, days: int) -> DateStr:
        """Return a new DateStr moved back by the given number of days.

        Examples:
            >>> DateStr(2023, 1, 1).subtract_days(1)
            DateStr(2022, 12, 30)
        """
        from datestr.arithmetic.ops import subtract_days

        return subtract_days(self, days)

    def days_until(self, other: DateStr) -> int:
        """Return other - self in days under the 30-day model."""
        from datestr.arithmetic.ops import difference

        return difference(other, self)

    def to_iso8601(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> DateStr(2023, 7, 4).to_iso8601()
            '2023-07-04'
            >>> DateStr(12345, 1, 1).to_iso8601()
            '12345-01-01'
        """
        from datestr.format.iso8601 import format_iso8601

        return format_iso8601(self)

    def format(self, spec: FormatSpec | str, separator: str | None = None) -> str:
        """Format the date with a FormatSpec or a pattern string.

        A pattern string such as "DD/MM/YYYY" is compiled with
        FormatSpec.from_pattern; separator replaces its literals.

        Raises:
            UnsupportedTokenError: If the pattern names an unknown field.

        Examples:
            >>> DateStr(2023, 7, 4).format("DD/MM/YYYY")
            '04/07/2023'
            >>> DateStr(2022, 12, 29).format("dd-mm-yyyy", separator="/")
            '29/12/2022'
        """
        from datestr.format.custom import to_custom
        from datestr.format.spec import FormatSpec

        if isinstance(spec, str):
            spec = FormatSpec.from_pattern(spec, separator=separator)
        elif separator is not None:
            spec = spec.with_separator(separator)
        return to_custom(self, spec)

    def __add__(self, other: object) -> DateStr:
        """Add a number of days.

        Examples:
            >>> DateStr(2023, 12, 30) + 1
            DateStr(2024, 1, 1)
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    def __radd__(self, other: object) -> DateStr:
        return self.__add__(other)

    @overload
    def __sub__(self, other: int) -> DateStr: ...

    @overload
    def __sub__(self, other: DateStr) -> int: ...

    def __sub__(self, other: object) -> DateStr | int:
        """Subtract a number of days or another DateStr.

        Subtracting an int returns a DateStr; subtracting a DateStr
        returns the day difference as an int.

        Examples:
            >>> DateStr(2023, 3, 1) - DateStr(2023, 2, 1)
            30
            >>> DateStr(2023, 3, 2) - 1
            DateStr(2023, 3, 1)
            >>> DateStr(2023, 3, 1) - 1  # lands on Feb 30
            Traceback (most recent call last):
            ...
            InvalidDayError: day must be between 1 and 28 for 2023-02, got 30
        """
        if isinstance(other, DateStr):
            return self._ordinal - other._ordinal
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.subtract_days(other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> DateStr(2023, 1, 31) == DateStr(2023, 2, 1)
            False
        """
        if not isinstance(other, DateStr):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> DateStr(2023, 1, 31) < DateStr(2023, 2, 1)
            True
        """
        if not isinstance(other, DateStr):
            return NotImplemented
        return self.to_tuple() < other.to_tuple()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, DateStr):
            return NotImplemented
        return self.to_tuple() <= other.to_tuple()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, DateStr):
            return NotImplemented
        return self.to_tuple() > other.to_tuple()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, DateStr):
            return NotImplemented
        return self.to_tuple() >= other.to_tuple()

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[DateStr], tuple[int, int, int]]:
        return (DateStr, self.to_tuple())

    def __repr__(self) -> str:
        """Return a string like 'DateStr(2023, 7, 4)'."""
        return f"DateStr({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso8601()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["DateStr"]
