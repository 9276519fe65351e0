"""
DocketClock Domain Models

Enums, holiday definitions and deadline records used by the engine.
"""
from __future__ import annotations

from .deadline import DeadlineRule, DeadlineStatus, GracePeriodDisplay
from .enums import (
    CRITICAL_THRESHOLD_DAYS,
    URGENT_THRESHOLD_DAYS,
    WARNING_THRESHOLD_DAYS,
    DeadlineRuleKind,
    UrgencyLevel,
)
from .holidays import (
    FRIDAY,
    LAST,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    FixedDateHoliday,
    FloatingWeekdayHoliday,
    HolidayDefinition,
    Occurrence,
)

__all__ = [
    # Enums
    "DeadlineRuleKind",
    "UrgencyLevel",
    "CRITICAL_THRESHOLD_DAYS",
    "URGENT_THRESHOLD_DAYS",
    "WARNING_THRESHOLD_DAYS",
    # Holidays
    "FixedDateHoliday",
    "FloatingWeekdayHoliday",
    "HolidayDefinition",
    "Occurrence",
    "LAST",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
    # Deadlines
    "DeadlineRule",
    "DeadlineStatus",
    "GracePeriodDisplay",
]
