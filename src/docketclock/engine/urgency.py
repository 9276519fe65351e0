"""
DocketClock Urgency Evaluator

Countdown classification of deadlines for display.

Thresholds (days remaining, evaluated in order):
    < 0   -> closed
    <= 30 -> critical
    <= 60 -> urgent
    <= 90 -> warning
    else  -> normal
"""
from __future__ import annotations

from typing import Optional

from ..calendars import CalendarDate, DateInput
from ..models import DeadlineStatus, UrgencyLevel


def days_between(start: DateInput, end: DateInput) -> int:
    """Signed number of calendar days from start to end."""
    return CalendarDate.parse(start).days_until(CalendarDate.parse(end))


def days_until_deadline(deadline: DateInput, today: Optional[DateInput] = None) -> int:
    """
    Calculate days remaining until a deadline.

    Args:
        deadline: Deadline date
        today: Reference date (defaults to the system's current date)

    Returns:
        Days remaining; negative once the deadline has passed
    """
    reference = CalendarDate.today() if today is None else CalendarDate.parse(today)
    return reference.days_until(CalendarDate.parse(deadline))


def get_deadline_status(
    deadline: DateInput,
    today: Optional[DateInput] = None,
) -> DeadlineStatus:
    """
    Get the countdown status of a deadline.

    Args:
        deadline: Deadline date
        today: Reference date (defaults to the system's current date)

    Returns:
        DeadlineStatus computed fresh for the reference date
    """
    deadline_date = CalendarDate.parse(deadline)
    days_remaining = days_until_deadline(deadline_date, today)
    urgency = UrgencyLevel.for_days_remaining(days_remaining)

    return DeadlineStatus(
        deadline=deadline_date.isoformat(),
        days_remaining=days_remaining,
        urgency=urgency,
        is_closed=urgency == UrgencyLevel.CLOSED,
        is_critical=urgency == UrgencyLevel.CRITICAL,
    )


def get_discovery_close_status(
    discovery_close_date: DateInput,
    today: Optional[DateInput] = None,
) -> DeadlineStatus:
    """Get the countdown status of a discovery close date."""
    return get_deadline_status(discovery_close_date, today)
