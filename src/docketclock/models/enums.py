"""
DocketClock Enumerations

All enumeration types used throughout the DocketClock engine.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Deadline Rule Kinds
# =============================================================================

class DeadlineRuleKind(str, Enum):
    """
    Counting rule a statutory deadline is computed under.

    Fixed by the statute being modeled, never chosen at the call site
    of a derived deadline function.
    """
    CALENDAR_DAYS = "calendar_days"    # Count every day, roll forward at the end
    BUSINESS_DAYS = "business_days"    # Short deadlines: skip non-business days while counting
    MONTHS = "months"                  # Same day-of-month, roll forward at the end

    @property
    def unit(self) -> str:
        """Unit label used in human-readable descriptions."""
        return {
            DeadlineRuleKind.CALENDAR_DAYS: "calendar days",
            DeadlineRuleKind.BUSINESS_DAYS: "business days",
            DeadlineRuleKind.MONTHS: "months",
        }[self]


# =============================================================================
# Urgency Levels
# =============================================================================

# Inclusive upper bounds of days remaining, evaluated in order
CRITICAL_THRESHOLD_DAYS = 30
URGENT_THRESHOLD_DAYS = 60
WARNING_THRESHOLD_DAYS = 90


class UrgencyLevel(str, Enum):
    """
    Countdown severity bucket for a deadline.

    Ordered from most to least severe: CLOSED < CRITICAL < URGENT < WARNING < NORMAL.
    Compare with `rank`, not with the string values.
    """
    CLOSED = "closed"        # Deadline has passed
    CRITICAL = "critical"    # 0-30 days remaining
    URGENT = "urgent"        # 31-60 days remaining
    WARNING = "warning"      # 61-90 days remaining
    NORMAL = "normal"        # More than 90 days remaining

    @property
    def rank(self) -> int:
        """Severity rank (0 = most severe)."""
        return _URGENCY_ORDER.index(self)

    @property
    def color(self) -> str:
        """Display color for countdown badges."""
        return _URGENCY_COLORS[self]

    @classmethod
    def for_days_remaining(cls, days_remaining: int) -> UrgencyLevel:
        """
        Classify a signed day count into its urgency bucket.

        Args:
            days_remaining: Days until the deadline (negative = overdue)

        Returns:
            The matching UrgencyLevel
        """
        if days_remaining < 0:
            return cls.CLOSED
        if days_remaining <= CRITICAL_THRESHOLD_DAYS:
            return cls.CRITICAL
        if days_remaining <= URGENT_THRESHOLD_DAYS:
            return cls.URGENT
        if days_remaining <= WARNING_THRESHOLD_DAYS:
            return cls.WARNING
        return cls.NORMAL


_URGENCY_ORDER = (
    UrgencyLevel.CLOSED,
    UrgencyLevel.CRITICAL,
    UrgencyLevel.URGENT,
    UrgencyLevel.WARNING,
    UrgencyLevel.NORMAL,
)

_URGENCY_COLORS = {
    UrgencyLevel.CLOSED: "gray",
    UrgencyLevel.CRITICAL: "red",
    UrgencyLevel.URGENT: "orange",
    UrgencyLevel.WARNING: "yellow",
    UrgencyLevel.NORMAL: "green",
}
