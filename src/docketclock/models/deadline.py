"""
DocketClock Deadline Models

Models for statutory deadline rules and the computed, non-persisted
values derived from them.

Key components:
- DeadlineRule: Named statutory deadline (rule kind + magnitude)
- DeadlineStatus: Countdown status of a deadline relative to today
- GracePeriodDisplay: Display-only grace period alongside a deadline

DeadlineStatus and GracePeriodDisplay are recomputed on every query and
never stored; their validity depends on the reference date.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .enums import DeadlineRuleKind, UrgencyLevel


# =============================================================================
# Deadline Rule
# =============================================================================

@dataclass(frozen=True)
class DeadlineRule:
    """
    A statutory deadline definition.

    Attributes:
        id: Unique identifier (e.g., "answer")
        name: Display name
        kind: Counting rule (calendar days, business days, months)
        magnitude: Number of units to advance (non-negative)
        description: Human-readable description
        authority: Citation to the governing statute or rule
    """
    id: str
    name: str
    kind: DeadlineRuleKind
    magnitude: int
    description: str = ""
    authority: Optional[str] = None

    @property
    def display_period(self) -> str:
        """Get human-readable period description (e.g., "30 calendar days")."""
        return f"{self.magnitude} {self.kind.unit}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "magnitude": self.magnitude,
            "description": self.description,
            "authority": self.authority,
        }


# =============================================================================
# Deadline Status
# =============================================================================

@dataclass(frozen=True)
class DeadlineStatus:
    """
    Countdown status of a deadline.

    Attributes:
        deadline: The deadline date (YYYY-MM-DD)
        days_remaining: Signed days until deadline (negative = overdue)
        urgency: Severity bucket
        is_closed: True once the deadline has passed
        is_critical: True only while 0-30 days remain
    """
    deadline: str
    days_remaining: int
    urgency: UrgencyLevel
    is_closed: bool
    is_critical: bool

    @property
    def color(self) -> str:
        return self.urgency.color

    @property
    def days_overdue(self) -> int:
        """Days past the deadline (0 if not overdue)."""
        return max(0, -self.days_remaining)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deadline": self.deadline,
            "days_remaining": self.days_remaining,
            "urgency": self.urgency.value,
            "color": self.color,
            "is_closed": self.is_closed,
            "is_critical": self.is_critical,
        }


# =============================================================================
# Grace Period Display
# =============================================================================

@dataclass(frozen=True)
class GracePeriodDisplay:
    """
    A deadline shown together with a supplemental grace-period end date.

    The grace end is informational only; `deadline` remains authoritative.
    """
    deadline: str
    grace_end: str
    grace_days: int
    display_text: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "deadline": self.deadline,
            "grace_end": self.grace_end,
            "grace_days": self.grace_days,
            "display_text": self.display_text,
        }
