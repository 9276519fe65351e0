"""
DocketClock Derived Deadlines

Named statutory deadlines for Georgia civil litigation, each fixing both
its counting rule and its magnitude.

New deadlines are added by registering a DeadlineRule, never by changing
an advancer.

Key features:
- Registry of Georgia deadline rules
- Answer deadline (30 calendar days from service)
- Discovery close (6 months from the answer)
- DeadlineCalculator bundling a calendar, a rule set and a reference date
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional, Union

from ..calendars import GEORGIA_CALENDAR, DateInput
from ..calendars.base import HolidayCalendar
from ..exceptions import UnknownDeadlineRule
from ..models import DeadlineRule, DeadlineRuleKind, DeadlineStatus, GracePeriodDisplay
from .advancers import advance
from .grace import format_with_grace_period
from .urgency import get_deadline_status


# =============================================================================
# Georgia Deadline Rules
# =============================================================================

ANSWER_DEADLINE_RULE = DeadlineRule(
    id="answer",
    name="Answer Deadline",
    kind=DeadlineRuleKind.CALENDAR_DAYS,
    magnitude=30,
    description="Answer due 30 days after service of the complaint",
    authority="O.C.G.A. § 9-11-12(a)",
)

DISCOVERY_CLOSE_RULE = DeadlineRule(
    id="discovery_close",
    name="Discovery Close",
    kind=DeadlineRuleKind.MONTHS,
    magnitude=6,
    description="Discovery closes 6 months after the answer is filed",
    authority="Uniform Superior Court Rule 5.1",
)

GEORGIA_DEADLINE_RULES: Mapping[str, DeadlineRule] = {
    rule.id: rule for rule in (ANSWER_DEADLINE_RULE, DISCOVERY_CLOSE_RULE)
}


def get_deadline_rule(
    rule_id: str,
    rules: Optional[Mapping[str, DeadlineRule]] = None,
) -> DeadlineRule:
    """
    Look up a deadline rule by ID.

    Raises:
        UnknownDeadlineRule: If no rule is registered under the ID
    """
    registry = GEORGIA_DEADLINE_RULES if rules is None else rules
    try:
        return registry[rule_id]
    except KeyError:
        raise UnknownDeadlineRule(
            message=f"Unknown deadline rule: {rule_id!r}",
            details={"rule_id": rule_id, "known_rules": sorted(registry)},
        ) from None


def calculate_deadline(
    rule: Union[DeadlineRule, str],
    trigger_date: DateInput,
    calendar: Optional[HolidayCalendar] = None,
    rules: Optional[Mapping[str, DeadlineRule]] = None,
) -> str:
    """
    Calculate the deadline for a rule from its trigger date.

    Args:
        rule: A DeadlineRule or the ID of a registered rule
        trigger_date: Date the period starts from (not counted)
        calendar: Holiday calendar (defaults to Georgia)
        rules: Registry used to resolve rule IDs (defaults to Georgia rules)

    Returns:
        Deadline date (YYYY-MM-DD)
    """
    if isinstance(rule, str):
        rule = get_deadline_rule(rule, rules)
    return advance(trigger_date, rule.kind, rule.magnitude, calendar)


def calculate_answer_deadline(service_date: DateInput) -> str:
    """
    Calculate the answer deadline (30 days from service).

    Standard deadline: counted in calendar days with roll-forward.
    """
    return calculate_deadline(ANSWER_DEADLINE_RULE, service_date)


def calculate_discovery_close(answer_filed_date: DateInput) -> str:
    """
    Calculate the discovery close date (6 months from the answer).

    Same day-of-month six months later, rolled forward to a business day.
    """
    return calculate_deadline(DISCOVERY_CLOSE_RULE, answer_filed_date)


# =============================================================================
# Deadline Calculator
# =============================================================================

@dataclass
class DeadlineCalculator:
    """
    Calculates deadlines and countdowns against one calendar and rule set.

    Usage:
        calculator = DeadlineCalculator()

        deadline = calculator.calculate("answer", "2025-01-15")
        status = calculator.status(deadline)
        print(f"Due: {deadline}, Urgency: {status.urgency.value}")

        # Countdown relative to a fixed date instead of today
        calculator = DeadlineCalculator(reference_date=date(2025, 1, 1))
    """

    # Calendar for business day classification
    calendar: HolidayCalendar = field(default=GEORGIA_CALENDAR)

    # Named rules available to calculate()
    rules: Mapping[str, DeadlineRule] = field(
        default_factory=lambda: dict(GEORGIA_DEADLINE_RULES)
    )

    # Reference date for countdowns (defaults to today)
    reference_date: Optional[date] = None

    def calculate(self, rule: Union[DeadlineRule, str], trigger_date: DateInput) -> str:
        """Calculate a deadline for a rule (or rule ID) from a trigger date."""
        return calculate_deadline(rule, trigger_date, self.calendar, self.rules)

    def calculate_all(self, trigger_dates: Mapping[str, DateInput]) -> dict[str, str]:
        """
        Calculate deadlines for several rules.

        Args:
            trigger_dates: Dict of rule_id -> trigger date

        Returns:
            Dict of rule_id -> deadline date, in sorted rule ID order
        """
        return {
            rule_id: self.calculate(rule_id, trigger_dates[rule_id])
            for rule_id in sorted(trigger_dates)
        }

    def status(self, deadline: DateInput) -> DeadlineStatus:
        """Get the countdown status of a deadline relative to the reference date."""
        return get_deadline_status(deadline, today=self.reference_date)

    def with_grace_period(
        self,
        deadline: DateInput,
        grace_days: int,
        label: Optional[str] = None,
    ) -> GracePeriodDisplay:
        """Pair a deadline with a display-only grace period end date."""
        return format_with_grace_period(deadline, grace_days, label, self.calendar)

    def describe(self, rule_id: str) -> str:
        """Get a one-line description of a registered rule."""
        rule = get_deadline_rule(rule_id, self.rules)
        text = f"{rule.name}: {rule.display_period}"
        if rule.authority:
            text += f" ({rule.authority})"
        return text

