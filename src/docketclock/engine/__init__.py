"""
DocketClock Engine

Deadline computation on top of the holiday calendars.

Components:
- Day classifier: weekend / holiday / business day checks
- Advancers: calendar-day, business-day and month arithmetic
- Derived deadlines: named statutory deadlines and DeadlineCalculator
- Urgency evaluator: countdown status for display
- Grace-period formatter: display-only supplemental dates

Usage:
    from docketclock.engine import (
        calculate_answer_deadline,
        get_deadline_status,
    )

    deadline = calculate_answer_deadline("2024-12-20")   # "2025-01-21"
    status = get_deadline_status(deadline)
"""
from __future__ import annotations

from .advancers import (
    SHORT_DEADLINE_THRESHOLD_DAYS,
    add_business_days,
    add_calendar_days,
    add_months,
    add_statutory_days,
    advance,
    roll_forward,
    statutory_rule_kind,
    validate_magnitude,
)
from .classifier import (
    business_days_between,
    holiday_name,
    is_business_day,
    is_holiday,
    is_weekend,
    resolve_holidays,
)
from .deadlines import (
    ANSWER_DEADLINE_RULE,
    DISCOVERY_CLOSE_RULE,
    GEORGIA_DEADLINE_RULES,
    DeadlineCalculator,
    calculate_answer_deadline,
    calculate_deadline,
    calculate_discovery_close,
    get_deadline_rule,
)
from .grace import (
    ELECTRONIC_SERVICE_GRACE_DAYS,
    format_deadline_with_electronic_service,
    format_with_grace_period,
)
from .urgency import (
    days_between,
    days_until_deadline,
    get_deadline_status,
    get_discovery_close_status,
)

__all__ = [
    # Classifier
    "resolve_holidays",
    "is_weekend",
    "is_holiday",
    "is_business_day",
    "holiday_name",
    "business_days_between",
    # Advancers
    "SHORT_DEADLINE_THRESHOLD_DAYS",
    "validate_magnitude",
    "roll_forward",
    "add_calendar_days",
    "add_business_days",
    "add_months",
    "advance",
    "statutory_rule_kind",
    "add_statutory_days",
    # Derived deadlines
    "ANSWER_DEADLINE_RULE",
    "DISCOVERY_CLOSE_RULE",
    "GEORGIA_DEADLINE_RULES",
    "DeadlineCalculator",
    "get_deadline_rule",
    "calculate_deadline",
    "calculate_answer_deadline",
    "calculate_discovery_close",
    # Urgency
    "days_between",
    "days_until_deadline",
    "get_deadline_status",
    "get_discovery_close_status",
    # Grace period
    "ELECTRONIC_SERVICE_GRACE_DAYS",
    "format_with_grace_period",
    "format_deadline_with_electronic_service",
]
