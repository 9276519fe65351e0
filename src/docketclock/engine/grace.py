"""
DocketClock Grace-Period Formatter

Display-only grace periods shown alongside an authoritative deadline.

Per O.C.G.A. § 9-11-6(e) the three days allowed for electronic service
are shown to the user but never added to the computed deadline itself.
"""
from __future__ import annotations

from typing import Optional

from ..calendars import CalendarDate, DateInput
from ..calendars.base import HolidayCalendar
from ..models import GracePeriodDisplay
from .advancers import add_calendar_days, validate_magnitude

ELECTRONIC_SERVICE_GRACE_DAYS = 3
ELECTRONIC_SERVICE_LABEL = "electronic service"


def format_with_grace_period(
    deadline: DateInput,
    grace_days: int,
    label: Optional[str] = None,
    calendar: Optional[HolidayCalendar] = None,
) -> GracePeriodDisplay:
    """
    Pair a deadline with the end date of a grace period.

    The grace end is computed with the calendar-day advancer, so it also
    rolls forward off weekends and holidays.

    Args:
        deadline: Authoritative deadline
        grace_days: Grace period in calendar days
        label: Optional grace period label (e.g., "electronic service")
        calendar: Holiday calendar (defaults to Georgia)

    Returns:
        GracePeriodDisplay with the unchanged deadline, grace end and text
    """
    deadline_iso = CalendarDate.parse(deadline).isoformat()
    days = validate_magnitude(grace_days, "grace days")
    grace_end = add_calendar_days(deadline_iso, days, calendar)

    period = f"+{days} days {label}" if label else f"+{days} days"
    return GracePeriodDisplay(
        deadline=deadline_iso,
        grace_end=grace_end,
        grace_days=days,
        display_text=f"Deadline: {deadline_iso} ({period} grace period ends {grace_end})",
    )


def format_deadline_with_electronic_service(
    deadline: DateInput,
    calendar: Optional[HolidayCalendar] = None,
) -> GracePeriodDisplay:
    """Show a deadline with the 3-day electronic service grace period."""
    return format_with_grace_period(
        deadline,
        ELECTRONIC_SERVICE_GRACE_DAYS,
        ELECTRONIC_SERVICE_LABEL,
        calendar,
    )
