"""
CalendarDate Tests

Tests for strict ISO parsing, formatting and date arithmetic.
"""
from __future__ import annotations

from datetime import date, datetime

import pytest

from docketclock import CalendarDate, InvalidDateFormat, format_date, parse_date


class TestParsing:
    """Test boundary parsing of calendar dates."""

    def test_parse_iso_string(self) -> None:
        d = CalendarDate.parse("2025-01-15")
        assert d.value == date(2025, 1, 15)
        assert (d.year, d.month, d.day) == (2025, 1, 15)

    def test_parse_accepts_date_and_calendar_date(self) -> None:
        d = CalendarDate.parse(date(2025, 1, 15))
        assert CalendarDate.parse(d) is d

    @pytest.mark.parametrize(
        "value",
        [
            "2025-1-15",
            "01/15/2025",
            "20250115",
            "2025-01-15T00:00:00",
            " 2025-01-15",
            "2025-01-15\n",
            "",
            "January 15, 2025",
        ],
    )
    def test_rejects_malformed_strings(self, value: str) -> None:
        with pytest.raises(InvalidDateFormat):
            CalendarDate.parse(value)

    @pytest.mark.parametrize("value", ["2025-02-29", "2025-13-01", "2025-04-31", "2025-00-10"])
    def test_rejects_impossible_dates(self, value: str) -> None:
        with pytest.raises(InvalidDateFormat) as exc_info:
            CalendarDate.parse(value)
        assert exc_info.value.code == "DC_INVALID_DATE_FORMAT"
        assert exc_info.value.details["value"] == value

    def test_leap_day_is_valid(self) -> None:
        assert CalendarDate.parse("2024-02-29").value == date(2024, 2, 29)

    def test_rejects_datetime(self) -> None:
        """A datetime carries time of day and is not a calendar date."""
        with pytest.raises(InvalidDateFormat):
            CalendarDate.parse(datetime(2025, 1, 15, 9, 30))

    @pytest.mark.parametrize("value", [None, 20250115, 2025.0, ["2025-01-15"]])
    def test_rejects_non_string_values(self, value) -> None:
        with pytest.raises(InvalidDateFormat):
            CalendarDate.parse(value)

    def test_error_string_includes_code(self) -> None:
        with pytest.raises(InvalidDateFormat) as exc_info:
            CalendarDate.parse("nope")
        assert str(exc_info.value).startswith("[DC_INVALID_DATE_FORMAT]")
        assert exc_info.value.to_dict()["code"] == "DC_INVALID_DATE_FORMAT"


class TestFormatting:
    """Test ISO formatting helpers."""

    def test_isoformat_and_str(self) -> None:
        d = CalendarDate.of(2025, 7, 4)
        assert d.isoformat() == "2025-07-04"
        assert str(d) == "2025-07-04"

    def test_parse_date_and_format_date(self) -> None:
        assert parse_date("2025-07-04") == date(2025, 7, 4)
        assert format_date(date(2025, 7, 4)) == "2025-07-04"


class TestArithmetic:
    """Test immutable day and month arithmetic."""

    def test_add_days_returns_new_value(self) -> None:
        d = CalendarDate.parse("2025-01-15")
        later = d.add_days(30)
        assert later.isoformat() == "2025-02-14"
        assert d.isoformat() == "2025-01-15"

    def test_add_days_crosses_year(self) -> None:
        assert CalendarDate.parse("2024-12-20").add_days(30).isoformat() == "2025-01-19"

    def test_weekday_and_weekend(self) -> None:
        saturday = CalendarDate.parse("2025-01-18")
        assert saturday.weekday == 5
        assert saturday.is_weekend
        assert not CalendarDate.parse("2025-01-17").is_weekend

    def test_days_until_is_signed(self) -> None:
        a = CalendarDate.parse("2025-01-15")
        b = CalendarDate.parse("2025-02-14")
        assert a.days_until(b) == 30
        assert b.days_until(a) == -30

    def test_ordering(self) -> None:
        assert CalendarDate.parse("2025-01-15") < CalendarDate.parse("2025-01-16")
        assert CalendarDate.parse("2025-01-15") == CalendarDate.of(2025, 1, 15)

    def test_add_months_same_day(self) -> None:
        assert CalendarDate.parse("2025-01-15").add_months(6).isoformat() == "2025-07-15"

    def test_add_months_crosses_year(self) -> None:
        assert CalendarDate.parse("2025-12-15").add_months(1).isoformat() == "2026-01-15"
        assert CalendarDate.parse("2025-08-15").add_months(18).isoformat() == "2027-02-15"

    @pytest.mark.parametrize(
        "start, months, expected",
        [
            ("2025-01-31", 1, "2025-02-28"),
            ("2024-01-31", 1, "2024-02-29"),
            ("2025-03-31", 1, "2025-04-30"),
            ("2025-08-31", 6, "2026-02-28"),
            ("2025-11-30", 3, "2026-02-28"),
        ],
    )
    def test_add_months_clamps_to_month_end(self, start: str, months: int, expected: str) -> None:
        """A day missing from the target month clamps instead of overflowing."""
        assert CalendarDate.parse(start).add_months(months).isoformat() == expected

    def test_add_zero_months(self) -> None:
        assert CalendarDate.parse("2025-01-31").add_months(0).isoformat() == "2025-01-31"

    def test_is_immutable(self) -> None:
        d = CalendarDate.parse("2025-01-15")
        with pytest.raises(AttributeError):
            d.value = date(2025, 1, 16)
