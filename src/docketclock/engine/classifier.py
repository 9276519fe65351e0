"""
DocketClock Day Classifier

String-boundary classification of dates as weekend days, holidays or
business days.

All public functions accept `YYYY-MM-DD` strings (or `date` /
CalendarDate values) and default to the Georgia holiday calendar.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Union

from ..calendars import GEORGIA_CALENDAR, CalendarDate, DateInput, StatutoryCalendar
from ..calendars.base import BaseCalendar, HolidayCalendar


def resolve_holidays(
    year: int,
    calendar: Optional[StatutoryCalendar] = None,
) -> tuple[str, ...]:
    """
    Get the holiday dates of a year as sorted ISO strings.

    Args:
        year: Year to resolve
        calendar: Definition-driven calendar (defaults to Georgia)

    Returns:
        Sorted tuple of `YYYY-MM-DD` strings
    """
    cal = calendar or GEORGIA_CALENDAR
    return tuple(d.isoformat() for d in sorted(cal.holiday_dates(year)))


def is_weekend(d: DateInput) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return CalendarDate.parse(d).is_weekend


def is_holiday(
    d: DateInput,
    holidays: Optional[Union[DateInput, Iterable[DateInput]]] = None,
    calendar: Optional[HolidayCalendar] = None,
) -> bool:
    """
    Check if a date is a holiday.

    Args:
        d: Date to check
        holidays: Explicit holiday dates to test against (a single date is
            treated as a one-element set); when omitted the holiday set of
            the date's year is derived from the calendar
        calendar: Calendar used when `holidays` is omitted (defaults to Georgia)

    Returns:
        True if the date is a holiday
    """
    target = CalendarDate.parse(d)
    if isinstance(holidays, (str, date, CalendarDate)):
        holidays = (holidays,)
    if holidays is not None:
        return target.value in {CalendarDate.parse(h).value for h in holidays}
    cal = calendar or GEORGIA_CALENDAR
    return cal.is_holiday(target.value)


def is_business_day(
    d: DateInput,
    calendar: Optional[HolidayCalendar] = None,
) -> bool:
    """Check if a date is neither a weekend day nor a holiday."""
    cal = calendar or GEORGIA_CALENDAR
    return cal.is_business_day(CalendarDate.parse(d).value)


def holiday_name(
    d: DateInput,
    calendar: Optional[StatutoryCalendar] = None,
) -> Optional[str]:
    """Get the name of the holiday on a date, or None."""
    cal = calendar or GEORGIA_CALENDAR
    return cal.get_holiday_name(CalendarDate.parse(d).value)


def business_days_between(
    start: DateInput,
    end: DateInput,
    calendar: Optional[BaseCalendar] = None,
) -> int:
    """
    Count business days between two dates.

    Args:
        start: Start date (exclusive)
        end: End date (inclusive)

    Returns:
        Number of business days (0 if end is not after start)
    """
    cal = calendar or GEORGIA_CALENDAR
    return cal.business_days_between(
        CalendarDate.parse(start).value,
        CalendarDate.parse(end).value,
    )
