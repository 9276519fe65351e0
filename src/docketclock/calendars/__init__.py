"""
DocketClock Calendars

Calendar-day value type and holiday calendars for business day
classification.

Primary focus: Georgia legal holidays for O.C.G.A. § 1-3-1 time computation.

Provides:
- CalendarDate immutable date value with strict ISO parsing
- HolidayCalendar protocol for custom implementations
- BaseCalendar with common business day logic
- StatutoryCalendar driven by a holiday definition table
- GEORGIA_CALENDAR for Georgia legal holidays (default)

Usage:
    from docketclock.calendars import GEORGIA_CALENDAR, CalendarDate

    d = CalendarDate.parse("2025-01-20")
    GEORGIA_CALENDAR.is_business_day(d.value)   # False (MLK Day)

    # Count business days between dates
    days = GEORGIA_CALENDAR.business_days_between(start_date, end_date)
"""
from __future__ import annotations

from .base import (
    BaseCalendar,
    FixedHolidayCalendar,
    HolidayCalendar,
    NoHolidayCalendar,
)
from .dates import (
    WEEKEND_DAYS,
    CalendarDate,
    DateInput,
    format_date,
    parse_date,
)
from .georgia import (
    GEORGIA_CALENDAR,
    GEORGIA_OBSERVED_CALENDAR,
    georgia_holiday_definitions,
    get_georgia_holiday_name,
    get_georgia_holidays,
    is_georgia_business_day,
    is_georgia_holiday,
)
from .holidays import (
    StatutoryCalendar,
    calculate_observed_holiday,
    holidays_for_year,
    last_weekday_of_month,
    nth_weekday_of_month,
    resolve_holiday,
    resolve_holiday_dates,
)

__all__ = [
    # Dates
    "CalendarDate",
    "DateInput",
    "WEEKEND_DAYS",
    "parse_date",
    "format_date",
    # Protocols and base classes
    "HolidayCalendar",
    "BaseCalendar",
    "NoHolidayCalendar",
    "FixedHolidayCalendar",
    "StatutoryCalendar",
    # Holiday resolution
    "nth_weekday_of_month",
    "last_weekday_of_month",
    "calculate_observed_holiday",
    "resolve_holiday",
    "resolve_holiday_dates",
    "holidays_for_year",
    # Georgia
    "GEORGIA_CALENDAR",
    "GEORGIA_OBSERVED_CALENDAR",
    "georgia_holiday_definitions",
    "get_georgia_holidays",
    "get_georgia_holiday_name",
    "is_georgia_holiday",
    "is_georgia_business_day",
]
