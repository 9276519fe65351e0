"""
DocketClock Exception Hierarchy

Domain-specific exceptions for statutory deadline computation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: DC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DocketClockError(Exception):
    """
    Base exception for all DocketClock errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (DC_*)
        details: Additional context about the error
    """
    message: str
    code: str = "DC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Validation Errors
# =============================================================================

@dataclass
class InvalidDateFormat(DocketClockError):
    """Input is not a well-formed YYYY-MM-DD calendar date."""
    code: str = "DC_INVALID_DATE_FORMAT"


@dataclass
class InvalidMagnitude(DocketClockError):
    """Day or month count is negative or not an integer."""
    code: str = "DC_INVALID_MAGNITUDE"


# =============================================================================
# Deadline Rule Errors
# =============================================================================

@dataclass
class UnknownDeadlineRule(DocketClockError):
    """Requested deadline rule is not registered."""
    code: str = "DC_UNKNOWN_RULE"


@dataclass
class InvalidRuleKind(DocketClockError):
    """Counting rule is not calendar days, business days or months."""
    code: str = "DC_INVALID_RULE_KIND"


# =============================================================================
# Rule Pack Errors
# =============================================================================

@dataclass
class RulePackLoadError(DocketClockError):
    """Failed to load rule pack from file."""
    code: str = "DC_PACK_LOAD_ERROR"


@dataclass
class RulePackValidationError(DocketClockError):
    """Rule pack schema validation failed."""
    code: str = "DC_PACK_VALIDATION_ERROR"


@dataclass
class RulePackVersionMismatch(DocketClockError):
    """Rule pack schema version doesn't match expected version."""
    code: str = "DC_PACK_VERSION_MISMATCH"
