"""Tests for the DateStr class."""

from __future__ import annotations

import copy
import pickle

import pytest

from datestr.core.date import DateStr
from datestr.errors import InvalidDayError, InvalidMonthError, ValidationError


class TestDateStrConstruction:
    """Tests for DateStr construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = DateStr(2023, 7, 4)
        assert d.year == 2023
        assert d.month == 7
        assert d.day == 4

    def test_from_parts(self) -> None:
        """from_parts is the same gate as the constructor."""
        assert DateStr.from_parts(2024, 2, 29) == DateStr(2024, 2, 29)

    @pytest.mark.parametrize(
        "year,month,day",
        [
            (2024, 1, 1),
            (2024, 12, 31),
            (2024, 2, 29),
            (2023, 2, 28),
            (2023, 4, 30),
            (0, 1, 1),
            (-44, 3, 15),
            (12345, 6, 7),
        ],
    )
    def test_valid_dates(self, year: int, month: int, day: int) -> None:
        """Valid triples construct with fields equal to the inputs."""
        d = DateStr.from_parts(year, month, day)
        assert (d.year, d.month, d.day) == (year, month, day)

    def test_every_day_of_leap_year(self) -> None:
        """Every calendar day of 2024 constructs."""
        count = 0
        for month, last in enumerate(
            [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], start=1
        ):
            for day in range(1, last + 1):
                DateStr(2024, month, day)
                count += 1
        assert count == 366

    @pytest.mark.parametrize("month", [0, 13, -1, 55])
    def test_invalid_month(self, month: int) -> None:
        """Months outside 1-12 raise InvalidMonthError."""
        with pytest.raises(InvalidMonthError, match="month must be between 1 and 12"):
            DateStr(2023, month, 2)

    def test_invalid_day_zero(self) -> None:
        """Day 0 raises InvalidDayError."""
        with pytest.raises(InvalidDayError, match="day must be between 1 and 31"):
            DateStr(2023, 12, 0)

    def test_invalid_day_negative(self) -> None:
        """Negative days raise InvalidDayError."""
        with pytest.raises(InvalidDayError):
            DateStr(2023, 12, -3)

    @pytest.mark.parametrize(
        "year,month,max_day",
        [(2023, 1, 31), (2023, 4, 30), (2023, 2, 28), (2024, 2, 29), (1900, 2, 28)],
    )
    def test_day_past_month_end(self, year: int, month: int, max_day: int) -> None:
        """The day after the last day of the month is rejected."""
        with pytest.raises(InvalidDayError) as exc:
            DateStr(year, month, max_day + 1)
        assert exc.value.max_day == max_day
        assert exc.value.day == max_day + 1

    def test_feb_29_leap_vs_common(self) -> None:
        """(2023, 2, 29) fails, (2024, 2, 29) succeeds."""
        with pytest.raises(InvalidDayError, match="day must be between 1 and 28"):
            DateStr(2023, 2, 29)
        assert DateStr(2024, 2, 29).day == 29

    def test_errors_share_base(self) -> None:
        """Month and day errors are ValidationErrors."""
        with pytest.raises(ValidationError):
            DateStr(2023, 13, 1)
        with pytest.raises(ValidationError):
            DateStr(2023, 4, 31)

    @pytest.mark.parametrize(
        "args", [(2023.0, 1, 1), (2023, "1", 1), (2023, 1, None), (True, 1, 1)]
    )
    def test_non_int_components(self, args: tuple) -> None:
        """Non-int components raise TypeError."""
        with pytest.raises(TypeError, match="must be int"):
            DateStr(*args)


class TestDateStrImmutability:
    """DateStr values never change after construction."""

    def test_cannot_set_component(self) -> None:
        """Assigning a property fails."""
        d = DateStr(2023, 7, 4)
        with pytest.raises(AttributeError):
            d.year = 2024  # type: ignore[misc]

    def test_cannot_set_private_slot(self) -> None:
        """Assigning the underlying slot fails too."""
        d = DateStr(2023, 7, 4)
        with pytest.raises(AttributeError):
            d._day = 31  # type: ignore[misc]
        assert d.day == 4

    def test_cannot_add_attribute(self) -> None:
        """New attributes cannot be attached."""
        d = DateStr(2023, 7, 4)
        with pytest.raises(AttributeError):
            d.extra = 1  # type: ignore[attr-defined]

    def test_copy_and_pickle(self) -> None:
        """Copies and pickles reconstruct an equal value."""
        d = DateStr(2023, 7, 4)
        assert copy.copy(d) == d
        assert copy.deepcopy(d) == d
        assert pickle.loads(pickle.dumps(d)) == d

    def test_replace_returns_new_value(self) -> None:
        """replace() leaves the original untouched."""
        d = DateStr(2023, 7, 4)
        r = d.replace(month=12)
        assert r == DateStr(2023, 12, 4)
        assert d == DateStr(2023, 7, 4)

    def test_replace_validates(self) -> None:
        """replace() goes through the validation gate."""
        with pytest.raises(InvalidDayError):
            DateStr(2024, 2, 29).replace(year=2023)


class TestDateStrProperties:
    """Tests for derived values."""

    def test_is_leap_year(self) -> None:
        """is_leap_year follows the year."""
        assert DateStr(2024, 1, 1).is_leap_year
        assert not DateStr(2023, 1, 1).is_leap_year

    def test_to_tuple(self) -> None:
        """to_tuple returns (year, month, day)."""
        assert DateStr(2023, 7, 4).to_tuple() == (2023, 7, 4)

    def test_to_ordinal(self) -> None:
        """to_ordinal uses the 30-day model."""
        assert DateStr(2023, 1, 15).to_ordinal() == 728294

    def test_from_ordinal(self) -> None:
        """from_ordinal inverts to_ordinal for days 1-30."""
        assert DateStr.from_ordinal(728294) == DateStr(2023, 1, 15)

    def test_from_ordinal_validates(self) -> None:
        """An ordinal landing on Feb 30 is rejected."""
        ordinal = DateStr(2023, 2, 28).to_ordinal() + 2
        with pytest.raises(InvalidDayError):
            DateStr.from_ordinal(ordinal)


class TestDateStrDunder:
    """Tests for repr, str, hash and friends."""

    def test_repr(self) -> None:
        """repr shows the constructor call."""
        assert repr(DateStr(2023, 7, 4)) == "DateStr(2023, 7, 4)"

    def test_str_is_iso(self) -> None:
        """str() is the ISO 8601 form."""
        assert str(DateStr(2023, 7, 4)) == "2023-07-04"

    def test_hash_equal_values(self) -> None:
        """Equal dates hash equally and dedupe in sets."""
        a = DateStr(2023, 7, 4)
        b = DateStr.from_string("2023-07-04")
        assert hash(a) == hash(b)
        assert len({a, b, DateStr(2023, 7, 5)}) == 2

    def test_bool(self) -> None:
        """Dates are always truthy."""
        assert DateStr(0, 1, 1)
