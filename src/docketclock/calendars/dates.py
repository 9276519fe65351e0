"""
DocketClock Calendar Dates

Immutable calendar-day value type used for all deadline arithmetic.

A CalendarDate has year/month/day granularity only. It never carries
time-of-day or a time zone, and crosses public boundaries as a strict
ISO `YYYY-MM-DD` string.

Month addition clamps to the last valid day of the target month:
    2025-01-31 + 1 month -> 2025-02-28
    2024-01-31 + 1 month -> 2024-02-29
"""
from __future__ import annotations

import re
from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

from ..exceptions import InvalidDateFormat, InvalidMagnitude

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

# Weekend days (0=Monday, 6=Sunday)
WEEKEND_DAYS = frozenset({5, 6})


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A calendar day.

    Usage:
        d = CalendarDate.parse("2025-01-15")
        d.add_days(30).isoformat()     # "2025-02-14"
        d.add_months(6).isoformat()    # "2025-07-15"
    """
    value: date

    @classmethod
    def parse(cls, value: DateInput) -> CalendarDate:
        """
        Parse a boundary value into a CalendarDate.

        Accepts an ISO `YYYY-MM-DD` string, a `date`, or a CalendarDate.
        `datetime` values are rejected because they carry a time component.

        Raises:
            InvalidDateFormat: If the value is not a well-formed calendar date
        """
        if isinstance(value, CalendarDate):
            return value
        if isinstance(value, datetime):
            raise InvalidDateFormat(
                message=f"Expected a calendar date without time, got datetime {value.isoformat()}",
                details={"value": value.isoformat()},
            )
        if isinstance(value, date):
            return cls(value)
        if not isinstance(value, str):
            raise InvalidDateFormat(
                message=f"Expected a YYYY-MM-DD string, got {type(value).__name__}",
                details={"value": repr(value)},
            )

        match = _ISO_DATE.fullmatch(value)
        if match is None:
            raise InvalidDateFormat(
                message=f"Date must be formatted YYYY-MM-DD: {value!r}",
                details={"value": value},
            )
        year, month, day = (int(part) for part in match.groups())
        try:
            return cls(date(year, month, day))
        except ValueError as e:
            raise InvalidDateFormat(
                message=f"Not a valid calendar date: {value!r} ({e})",
                details={"value": value},
            ) from e

    @classmethod
    def of(cls, year: int, month: int, day: int) -> CalendarDate:
        return cls(date(year, month, day))

    @classmethod
    def today(cls) -> CalendarDate:
        """Today's date from the local system clock."""
        return cls(date.today())

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def weekday(self) -> int:
        """Day of week (0=Monday, 6=Sunday)."""
        return self.value.weekday()

    @property
    def is_weekend(self) -> bool:
        return self.weekday in WEEKEND_DAYS

    def add_days(self, days: int) -> CalendarDate:
        """
        Return the date `days` calendar days later (earlier if negative).

        Raises:
            InvalidMagnitude: If the result falls outside years 1-9999
        """
        try:
            return CalendarDate(self.value + timedelta(days=days))
        except (OverflowError, ValueError) as e:
            raise _out_of_range(self, days, "days") from e

    def add_months(self, months: int) -> CalendarDate:
        """
        Return the same day-of-month `months` later.

        If the day does not exist in the target month, the result is
        clamped to the last day of that month.

        Raises:
            InvalidMagnitude: If the result falls outside years 1-9999
        """
        month_index = self.value.month - 1 + months
        year = self.value.year + month_index // 12
        month = month_index % 12 + 1
        try:
            day = min(self.value.day, monthrange(year, month)[1])
            return CalendarDate(date(year, month, day))
        except (OverflowError, ValueError) as e:
            raise _out_of_range(self, months, "months") from e

    def days_until(self, other: CalendarDate) -> int:
        """Signed number of days from this date to `other`."""
        return (other.value - self.value).days

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()


DateInput = Union[str, date, CalendarDate]


def _out_of_range(start: CalendarDate, value: int, unit: str) -> InvalidMagnitude:
    return InvalidMagnitude(
        message=f"Adding {value} {unit} to {start} leaves the supported date range",
        details={"start": start.isoformat(), "value": value, "unit": unit},
    )


def parse_date(value: DateInput) -> date:
    """Parse a boundary value into a `date` (see CalendarDate.parse)."""
    return CalendarDate.parse(value).value


def format_date(value: DateInput) -> str:
    """Format a date as `YYYY-MM-DD`."""
    return CalendarDate.parse(value).isoformat()
