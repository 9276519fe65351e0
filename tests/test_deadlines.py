"""
Derived Deadline, Urgency and Grace Period Tests

Tests cover:
- Answer and discovery close deadlines
- Rule registry lookup and DeadlineCalculator
- Urgency thresholds and countdown status
- Display-only electronic service grace period
"""
from __future__ import annotations

from datetime import date, timedelta

import pytest

from docketclock import (
    ANSWER_DEADLINE_RULE,
    DISCOVERY_CLOSE_RULE,
    GEORGIA_DEADLINE_RULES,
    DeadlineCalculator,
    DeadlineRule,
    DeadlineRuleKind,
    InvalidDateFormat,
    InvalidMagnitude,
    NoHolidayCalendar,
    UnknownDeadlineRule,
    UrgencyLevel,
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
)
from docketclock.calendars import CalendarDate


def days_from(today: date, n: int) -> str:
    return (today + timedelta(days=n)).isoformat()


# =============================================================================
# Derived Deadlines
# =============================================================================

class TestAnswerDeadline:
    """Test the 30-day answer deadline."""

    def test_simple_case(self) -> None:
        assert calculate_answer_deadline("2025-01-15") == "2025-02-14"

    def test_rolls_past_weekend_and_mlk_day(self) -> None:
        assert calculate_answer_deadline("2024-12-20") == "2025-01-21"

    def test_invalid_date(self) -> None:
        with pytest.raises(InvalidDateFormat):
            calculate_answer_deadline("12/20/2024")

    def test_rule_definition(self) -> None:
        assert ANSWER_DEADLINE_RULE.kind == DeadlineRuleKind.CALENDAR_DAYS
        assert ANSWER_DEADLINE_RULE.magnitude == 30
        assert ANSWER_DEADLINE_RULE.display_period == "30 calendar days"


class TestDiscoveryClose:
    """Test the 6-month discovery period."""

    def test_same_day_six_months_later(self) -> None:
        assert calculate_discovery_close("2025-01-15") == "2025-07-15"

    def test_friday_landing_day(self) -> None:
        assert calculate_discovery_close("2025-02-15") == "2025-08-15"

    def test_end_of_month_clamp(self) -> None:
        assert calculate_discovery_close("2025-08-31") == "2026-03-02"

    def test_rule_definition(self) -> None:
        assert DISCOVERY_CLOSE_RULE.kind == DeadlineRuleKind.MONTHS
        assert DISCOVERY_CLOSE_RULE.magnitude == 6


class TestRuleRegistry:
    """Test rule lookup by ID."""

    def test_registry_contents(self) -> None:
        assert set(GEORGIA_DEADLINE_RULES) == {"answer", "discovery_close"}

    def test_calculate_by_id(self) -> None:
        assert calculate_deadline("answer", "2025-01-15") == "2025-02-14"
        assert calculate_deadline("discovery_close", "2025-01-15") == "2025-07-15"

    def test_unknown_rule(self) -> None:
        with pytest.raises(UnknownDeadlineRule) as exc_info:
            get_deadline_rule("reply_brief")
        assert exc_info.value.code == "DC_UNKNOWN_RULE"
        assert exc_info.value.details["known_rules"] == ["answer", "discovery_close"]

    def test_ad_hoc_rule(self) -> None:
        rule = DeadlineRule(
            id="notice",
            name="Notice",
            kind=DeadlineRuleKind.BUSINESS_DAYS,
            magnitude=3,
        )
        assert calculate_deadline(rule, "2025-01-17") == "2025-01-23"
        assert rule.to_dict()["kind"] == "business_days"


class TestDeadlineCalculator:
    """Test the calculator facade."""

    def test_defaults_to_georgia(self) -> None:
        calculator = DeadlineCalculator()
        assert calculator.calculate("answer", "2024-12-20") == "2025-01-21"

    def test_custom_calendar(self) -> None:
        calculator = DeadlineCalculator(calendar=NoHolidayCalendar())
        assert calculator.calculate("answer", "2024-12-20") == "2025-01-20"

    def test_custom_rules(self) -> None:
        rule = DeadlineRule(
            id="response",
            name="Response",
            kind=DeadlineRuleKind.CALENDAR_DAYS,
            magnitude=10,
        )
        calculator = DeadlineCalculator(rules={"response": rule})
        assert calculator.calculate("response", "2025-01-15") == "2025-01-27"  # Jan 25 is a Saturday
        with pytest.raises(UnknownDeadlineRule):
            calculator.calculate("answer", "2025-01-15")

    def test_calculate_all_sorted(self) -> None:
        calculator = DeadlineCalculator()
        results = calculator.calculate_all({
            "discovery_close": "2025-02-14",
            "answer": "2025-01-15",
        })
        assert list(results) == ["answer", "discovery_close"]
        assert results == {"answer": "2025-02-14", "discovery_close": "2025-08-14"}

    def test_status_uses_reference_date(self, today: date) -> None:
        calculator = DeadlineCalculator(reference_date=today)
        status = calculator.status("2025-02-14")
        assert status.days_remaining == 30
        assert status.urgency == UrgencyLevel.CRITICAL

    def test_with_grace_period(self) -> None:
        display = DeadlineCalculator().with_grace_period("2025-02-14", 3, "electronic service")
        assert display.grace_end == "2025-02-17"

    def test_describe(self) -> None:
        calculator = DeadlineCalculator()
        assert calculator.describe("answer") == (
            "Answer Deadline: 30 calendar days (O.C.G.A. § 9-11-12(a))"
        )
        assert calculator.describe("discovery_close") == (
            "Discovery Close: 6 months (Uniform Superior Court Rule 5.1)"
        )

    def test_rules_not_shared_between_instances(self) -> None:
        first = DeadlineCalculator()
        first.rules["extra"] = ANSWER_DEADLINE_RULE
        assert "extra" not in DeadlineCalculator().rules
        assert "extra" not in GEORGIA_DEADLINE_RULES


# =============================================================================
# Urgency
# =============================================================================

class TestUrgencyLevel:
    """Test urgency classification thresholds."""

    @pytest.mark.parametrize(
        "days, expected",
        [
            (-30, UrgencyLevel.CLOSED),
            (-1, UrgencyLevel.CLOSED),
            (0, UrgencyLevel.CRITICAL),
            (30, UrgencyLevel.CRITICAL),
            (31, UrgencyLevel.URGENT),
            (60, UrgencyLevel.URGENT),
            (61, UrgencyLevel.WARNING),
            (90, UrgencyLevel.WARNING),
            (91, UrgencyLevel.NORMAL),
            (365, UrgencyLevel.NORMAL),
        ],
    )
    def test_thresholds(self, days: int, expected: UrgencyLevel) -> None:
        assert UrgencyLevel.for_days_remaining(days) == expected

    def test_rank_orders_by_severity(self) -> None:
        levels = sorted(UrgencyLevel, key=lambda u: u.rank, reverse=True)
        assert levels[0] == UrgencyLevel.NORMAL
        assert levels[-1] == UrgencyLevel.CLOSED
        assert UrgencyLevel.CRITICAL.rank < UrgencyLevel.URGENT.rank

    def test_colors(self) -> None:
        assert UrgencyLevel.CLOSED.color == "gray"
        assert UrgencyLevel.CRITICAL.color == "red"
        assert UrgencyLevel.NORMAL.color == "green"


class TestDeadlineStatus:
    """Test countdown status against a fixed reference date."""

    def test_days_between(self) -> None:
        assert days_between("2025-01-15", "2025-02-14") == 30
        assert days_between("2025-02-14", "2025-01-15") == -30

    @pytest.mark.parametrize("n", [-1, 0, 30, 31, 60, 61, 90, 91])
    def test_status_matches_level(self, today: date, n: int) -> None:
        status = get_deadline_status(days_from(today, n), today=today)
        assert status.days_remaining == n
        assert status.urgency == UrgencyLevel.for_days_remaining(n)
        assert status.is_closed == (n < 0)
        assert status.is_critical == (0 <= n <= 30)

    def test_closed_deadline_is_not_critical(self, today: date) -> None:
        status = get_deadline_status(days_from(today, -5), today=today)
        assert status.is_closed
        assert not status.is_critical
        assert status.days_overdue == 5

    def test_due_today(self, today: date) -> None:
        status = get_deadline_status(today.isoformat(), today=today)
        assert status.days_remaining == 0
        assert status.is_critical
        assert not status.is_closed
        assert status.days_overdue == 0

    def test_accepts_string_reference_date(self) -> None:
        status = get_deadline_status("2025-07-15", today="2025-01-15")
        assert status.days_remaining == 181
        assert status.urgency == UrgencyLevel.NORMAL

    def test_defaults_to_today(self) -> None:
        deadline = CalendarDate.today().add_days(45)
        assert days_until_deadline(deadline) == 45
        assert get_deadline_status(deadline).urgency == UrgencyLevel.URGENT

    def test_discovery_close_status(self, today: date) -> None:
        status = get_discovery_close_status("2025-04-01", today=today)
        assert status.days_remaining == 76
        assert status.urgency == UrgencyLevel.WARNING

    def test_to_dict(self, today: date) -> None:
        status = get_deadline_status("2025-02-14", today=today)
        assert status.to_dict() == {
            "deadline": "2025-02-14",
            "days_remaining": 30,
            "urgency": "critical",
            "color": "red",
            "is_closed": False,
            "is_critical": True,
        }

    def test_invalid_date(self) -> None:
        with pytest.raises(InvalidDateFormat):
            get_deadline_status("2025-02-30", today="2025-01-15")


# =============================================================================
# Grace Period
# =============================================================================

class TestGracePeriod:
    """Test the display-only grace period formatter."""

    def test_electronic_service(self) -> None:
        display = format_deadline_with_electronic_service("2025-02-14")
        assert display.deadline == "2025-02-14"
        assert display.grace_end == "2025-02-17"
        assert display.grace_days == 3
        assert display.display_text == (
            "Deadline: 2025-02-14 (+3 days electronic service grace period ends 2025-02-17)"
        )

    def test_grace_end_rolls_forward(self) -> None:
        # Jan 19 is a Sunday and Jan 20 is MLK Day
        display = format_with_grace_period("2025-01-16", 3)
        assert display.grace_end == "2025-01-21"
        assert display.display_text == (
            "Deadline: 2025-01-16 (+3 days grace period ends 2025-01-21)"
        )

    def test_deadline_is_unchanged(self) -> None:
        deadline = calculate_answer_deadline("2024-12-20")
        display = format_deadline_with_electronic_service(deadline)
        assert display.deadline == deadline == "2025-01-21"
        assert display.grace_end == "2025-01-24"

    def test_negative_grace_days(self) -> None:
        with pytest.raises(InvalidMagnitude):
            format_with_grace_period("2025-02-14", -3)

    def test_to_dict(self) -> None:
        data = format_deadline_with_electronic_service("2025-02-14").to_dict()
        assert data["grace_end"] == "2025-02-17"
        assert data["grace_days"] == 3
