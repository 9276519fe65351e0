"""
DocketClock Deadline Advancers

Date arithmetic for the three statutory counting rules of O.C.G.A. § 1-3-1.

The trigger day itself is never counted (it is day 0).

- Calendar days (periods of 7 days or more): count every day, then roll a
  landing date that is a weekend or holiday forward to the next business day.
- Business days (periods under 7 days): weekends and holidays are excluded
  from the count itself, not only from the landing day.
- Months: same day-of-month N months later (clamped to the end of shorter
  months), then roll forward like calendar days.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..calendars import GEORGIA_CALENDAR, CalendarDate, DateInput
from ..calendars.base import HolidayCalendar
from ..exceptions import InvalidMagnitude, InvalidRuleKind
from ..models import DeadlineRuleKind

logger = logging.getLogger(__name__)

# Periods shorter than this are counted in business days
SHORT_DEADLINE_THRESHOLD_DAYS = 7


def validate_magnitude(value: int, unit: str) -> int:
    """Reject counts the statute does not define (negative or non-integer)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidMagnitude(
            message=f"Number of {unit} must be an integer, got {type(value).__name__}",
            details={"value": repr(value), "unit": unit},
        )
    if value < 0:
        raise InvalidMagnitude(
            message=f"Number of {unit} must not be negative, got {value}",
            details={"value": value, "unit": unit},
        )
    return value


def roll_forward(d: CalendarDate, calendar: HolidayCalendar) -> CalendarDate:
    """
    Advance a date one day at a time until it is a business day.

    Returns the date unchanged if it already is one.
    """
    current = d
    while not calendar.is_business_day(current.value):
        current = current.add_days(1)
    if current != d:
        logger.debug("Rolled %s forward to %s", d, current)
    return current


def add_calendar_days(
    start: DateInput,
    days: int,
    calendar: Optional[HolidayCalendar] = None,
) -> str:
    """
    Add calendar days to a date, rolling forward off a non-business landing day.

    Used for standard deadlines (7 days or more).

    Args:
        start: Trigger date (YYYY-MM-DD)
        days: Number of calendar days to add (non-negative)
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        Deadline date (YYYY-MM-DD), always a business day

    Raises:
        InvalidDateFormat: If start is not a valid date
        InvalidMagnitude: If days is negative or not an integer,
            or the result leaves the supported date range (years 1-9999)
    """
    start_date = CalendarDate.parse(start)
    count = validate_magnitude(days, "days")
    cal = calendar or GEORGIA_CALENDAR

    return roll_forward(start_date.add_days(count), cal).isoformat()


def add_business_days(
    start: DateInput,
    days: int,
    calendar: Optional[HolidayCalendar] = None,
) -> str:
    """
    Add business days to a date, skipping weekends and holidays while counting.

    Used for short deadlines (under 7 days). A count of zero returns the
    first business day on or after the start date.

    Args:
        start: Trigger date (YYYY-MM-DD)
        days: Number of business days to add (non-negative)
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        Deadline date (YYYY-MM-DD), always a business day

    Raises:
        InvalidDateFormat: If start is not a valid date
        InvalidMagnitude: If days is negative or not an integer,
            or the result leaves the supported date range (years 1-9999)
    """
    start_date = CalendarDate.parse(start)
    remaining = validate_magnitude(days, "business days")
    cal = calendar or GEORGIA_CALENDAR

    if remaining == 0:
        return roll_forward(start_date, cal).isoformat()

    current = start_date
    while remaining > 0:
        current = current.add_days(1)
        if cal.is_business_day(current.value):
            remaining -= 1

    return current.isoformat()


def add_months(
    start: DateInput,
    months: int,
    calendar: Optional[HolidayCalendar] = None,
) -> str:
    """
    Add months to a date, rolling forward off a non-business landing day.

    The day-of-month is held constant; when it does not exist in the target
    month the date is clamped to that month's last day before rolling forward.

    Args:
        start: Trigger date (YYYY-MM-DD)
        months: Number of months to add (non-negative)
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        Deadline date (YYYY-MM-DD), always a business day

    Raises:
        InvalidDateFormat: If start is not a valid date
        InvalidMagnitude: If months is negative or not an integer,
            or the result leaves the supported date range (years 1-9999)
    """
    start_date = CalendarDate.parse(start)
    count = validate_magnitude(months, "months")
    cal = calendar or GEORGIA_CALENDAR

    return roll_forward(start_date.add_months(count), cal).isoformat()


_ADVANCERS: dict[DeadlineRuleKind, Callable[..., str]] = {
    DeadlineRuleKind.CALENDAR_DAYS: add_calendar_days,
    DeadlineRuleKind.BUSINESS_DAYS: add_business_days,
    DeadlineRuleKind.MONTHS: add_months,
}


def advance(
    start: DateInput,
    kind: DeadlineRuleKind,
    magnitude: int,
    calendar: Optional[HolidayCalendar] = None,
) -> str:
    """
    Advance a date under the given counting rule.

    Args:
        start: Trigger date
        kind: Counting rule
        magnitude: Number of units
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        Deadline date (YYYY-MM-DD)

    Raises:
        InvalidRuleKind: If kind is not a DeadlineRuleKind value
    """
    try:
        rule_kind = DeadlineRuleKind(kind)
    except ValueError:
        raise InvalidRuleKind(
            message=f"Unknown counting rule: {kind!r}",
            details={"kind": repr(kind), "known_kinds": [k.value for k in DeadlineRuleKind]},
        ) from None
    return _ADVANCERS[rule_kind](start, magnitude, calendar)


def statutory_rule_kind(days: int) -> DeadlineRuleKind:
    """
    Classify a period in days under O.C.G.A. § 1-3-1.

    Short periods (under 7 days) are counted in business days; standard
    periods are counted in calendar days with roll-forward.
    """
    count = validate_magnitude(days, "days")
    if count < SHORT_DEADLINE_THRESHOLD_DAYS:
        return DeadlineRuleKind.BUSINESS_DAYS
    return DeadlineRuleKind.CALENDAR_DAYS


def add_statutory_days(
    start: DateInput,
    days: int,
    calendar: Optional[HolidayCalendar] = None,
) -> str:
    """
    Compute a deadline expressed in days, picking the counting rule by length.

    Args:
        start: Trigger date
        days: Statutory period in days
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        Deadline date (YYYY-MM-DD)
    """
    return advance(start, statutory_rule_kind(days), days, calendar)
