"""
Georgia Legal Holiday Calendar

Implements the Georgia court holiday schedule used when computing time
under O.C.G.A. § 1-3-1.

Georgia legal holidays:
- New Year's Day (January 1)
- Martin Luther King Jr. Day (3rd Monday in January)
- Memorial Day (Last Monday in May)
- Juneteenth (June 19)
- Independence Day (July 4)
- Labor Day (1st Monday in September)
- Columbus Day (2nd Monday in October)
- Veterans Day (November 11)
- Thanksgiving Day (4th Thursday in November)
- Christmas Day (December 25)

Fixed-date holidays are recorded on their literal date; a holiday that
falls on a weekend is not moved to a weekday. Whether the governing
statute requires an observed weekday has not been confirmed, so the
observed variant is available as GEORGIA_OBSERVED_CALENDAR.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..models import (
    LAST,
    MONDAY,
    THURSDAY,
    FixedDateHoliday,
    FloatingWeekdayHoliday,
    HolidayDefinition,
)
from .holidays import StatutoryCalendar

_GEORGIA_HOLIDAYS: tuple[HolidayDefinition, ...] = (
    FixedDateHoliday("new-years-day", "New Year's Day", 1, 1),
    FloatingWeekdayHoliday("martin-luther-king-day", "Martin Luther King Jr. Day", 1, MONDAY, 3),
    FloatingWeekdayHoliday("memorial-day", "Memorial Day", 5, MONDAY, LAST),
    FixedDateHoliday("juneteenth", "Juneteenth", 6, 19),
    FixedDateHoliday("independence-day", "Independence Day", 7, 4),
    FloatingWeekdayHoliday("labor-day", "Labor Day", 9, MONDAY, 1),
    FloatingWeekdayHoliday("columbus-day", "Columbus Day", 10, MONDAY, 2),
    FixedDateHoliday("veterans-day", "Veterans Day", 11, 11),
    FloatingWeekdayHoliday("thanksgiving-day", "Thanksgiving Day", 11, THURSDAY, 4),
    FixedDateHoliday("christmas-day", "Christmas Day", 12, 25),
)


def georgia_holiday_definitions() -> tuple[HolidayDefinition, ...]:
    """Get the immutable Georgia holiday definition table."""
    return _GEORGIA_HOLIDAYS


# Pre-configured calendar instances
GEORGIA_CALENDAR = StatutoryCalendar(definitions=_GEORGIA_HOLIDAYS)
GEORGIA_OBSERVED_CALENDAR = StatutoryCalendar(
    definitions=_GEORGIA_HOLIDAYS,
    observe_weekend_holidays=True,
)


def get_georgia_holidays(year: int) -> frozenset[date]:
    """
    Get Georgia legal holidays for a year (cached).

    Args:
        year: Year to get holidays for

    Returns:
        Frozenset of holiday dates
    """
    return GEORGIA_CALENDAR.holiday_dates(year)


def is_georgia_holiday(d: date) -> bool:
    """Check if a date is a Georgia legal holiday."""
    return GEORGIA_CALENDAR.is_holiday(d)


def is_georgia_business_day(d: date) -> bool:
    """
    Check if a date is a Georgia business day.

    A business day is a weekday that is not a legal holiday.
    """
    return GEORGIA_CALENDAR.is_business_day(d)


def get_georgia_holiday_name(d: date) -> Optional[str]:
    """Get the name of the Georgia holiday on a date, if any."""
    return GEORGIA_CALENDAR.get_holiday_name(d)
