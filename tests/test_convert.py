"""Tests for coercion helpers."""

from __future__ import annotations

import pytest

from datestr.convert import to_datestr, try_to_datestr
from datestr.core.date import DateStr
from datestr.errors import InvalidDayError, MalformedInputError


class TestToDateStr:
    """Tests for to_datestr()."""

    def test_from_string(self) -> None:
        """Strings are parsed as ISO 8601."""
        assert to_datestr("2023-01-02") == DateStr(2023, 1, 2)

    def test_from_datestr(self) -> None:
        """A DateStr is returned as-is."""
        d = DateStr(2023, 1, 2)
        assert to_datestr(d) is d

    def test_invalid_string(self) -> None:
        """Invalid strings raise the parser's errors."""
        with pytest.raises(InvalidDayError):
            to_datestr("2023-02-30")
        with pytest.raises(MalformedInputError):
            to_datestr("2023/01/02")

    def test_wrong_type(self) -> None:
        """Other types raise TypeError."""
        with pytest.raises(TypeError, match="expected DateStr or str"):
            to_datestr(20230102)  # type: ignore[arg-type]


class TestTryToDateStr:
    """Tests for try_to_datestr()."""

    def test_valid(self) -> None:
        assert try_to_datestr("2023-01-02") == DateStr(2023, 1, 2)

    @pytest.mark.parametrize(
        "text", ["2023-12-32", "2023-55-02", "2023-12--3", "2023--11-02", "2023-0-02", "2023-12-0"]
    )
    def test_invalid_returns_none(self, text: str) -> None:
        """Invalid dates yield None instead of raising."""
        assert try_to_datestr(text) is None

    def test_wrong_type_still_raises(self) -> None:
        """TypeError is not swallowed."""
        with pytest.raises(TypeError):
            try_to_datestr(None)  # type: ignore[arg-type]
