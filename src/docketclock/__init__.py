"""
DocketClock - Statutory Deadline Computation Engine

DocketClock computes court deadlines under Georgia's time-computation
statute (O.C.G.A. § 1-3-1), accounting for weekends and the Georgia
legal holiday calendar.

Core Principle: "Never count the trigger day; never land on a day the
clerk's office is closed."

Key Features:
- Strict calendar-day value type (no time of day, no time zone)
- Georgia holiday calendar (fixed and floating holidays)
- Calendar-day, business-day and month advancers with roll-forward
- Named statutory deadlines (answer, discovery close)
- Countdown urgency classification for display
- Display-only grace periods (electronic service)
- YAML/JSON rule packs for other holiday tables and deadlines

Quick Start:
    from docketclock import (
        calculate_answer_deadline,
        add_business_days,
        get_deadline_status,
    )

    calculate_answer_deadline("2024-12-20")       # "2025-01-21"
    add_business_days("2025-01-14", 3)            # "2025-01-17"
    get_deadline_status("2025-07-15").urgency     # UrgencyLevel.*

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "DocketClock Team"

# =============================================================================
# Calendars
# =============================================================================
from .calendars import (
    GEORGIA_CALENDAR,
    GEORGIA_OBSERVED_CALENDAR,
    BaseCalendar,
    CalendarDate,
    FixedHolidayCalendar,
    HolidayCalendar,
    NoHolidayCalendar,
    StatutoryCalendar,
    format_date,
    georgia_holiday_definitions,
    parse_date,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    ANSWER_DEADLINE_RULE,
    DISCOVERY_CLOSE_RULE,
    ELECTRONIC_SERVICE_GRACE_DAYS,
    GEORGIA_DEADLINE_RULES,
    SHORT_DEADLINE_THRESHOLD_DAYS,
    DeadlineCalculator,
    add_business_days,
    add_calendar_days,
    add_months,
    add_statutory_days,
    advance,
    business_days_between,
    calculate_answer_deadline,
    calculate_deadline,
    calculate_discovery_close,
    days_between,
    days_until_deadline,
    format_deadline_with_electronic_service,
    format_with_grace_period,
    get_deadline_rule,
    get_deadline_status,
    get_discovery_close_status,
    holiday_name,
    is_business_day,
    is_holiday,
    is_weekend,
    resolve_holidays,
    statutory_rule_kind,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    DocketClockError,
    InvalidDateFormat,
    InvalidMagnitude,
    InvalidRuleKind,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
    UnknownDeadlineRule,
)

# =============================================================================
# Models
# =============================================================================
from .models import (
    LAST,
    DeadlineRule,
    DeadlineRuleKind,
    DeadlineStatus,
    FixedDateHoliday,
    FloatingWeekdayHoliday,
    GracePeriodDisplay,
    HolidayDefinition,
    UrgencyLevel,
)

__all__ = [
    # Version
    "__version__",
    # Calendars
    "CalendarDate",
    "parse_date",
    "format_date",
    "HolidayCalendar",
    "BaseCalendar",
    "NoHolidayCalendar",
    "FixedHolidayCalendar",
    "StatutoryCalendar",
    "GEORGIA_CALENDAR",
    "GEORGIA_OBSERVED_CALENDAR",
    "georgia_holiday_definitions",
    # Classifier
    "resolve_holidays",
    "is_weekend",
    "is_holiday",
    "is_business_day",
    "holiday_name",
    "business_days_between",
    # Advancers
    "SHORT_DEADLINE_THRESHOLD_DAYS",
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
    # Models
    "DeadlineRuleKind",
    "UrgencyLevel",
    "FixedDateHoliday",
    "FloatingWeekdayHoliday",
    "HolidayDefinition",
    "LAST",
    "DeadlineRule",
    "DeadlineStatus",
    "GracePeriodDisplay",
    # Exceptions
    "DocketClockError",
    "InvalidDateFormat",
    "InvalidMagnitude",
    "InvalidRuleKind",
    "UnknownDeadlineRule",
    "RulePackLoadError",
    "RulePackValidationError",
    "RulePackVersionMismatch",
]
