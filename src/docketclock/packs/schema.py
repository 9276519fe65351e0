"""
DocketClock Rule Pack Schemas

Pydantic models for validating rule pack YAML/JSON files.

A rule pack configures the engine for one jurisdiction: its holiday
table and its named statutory deadlines. The schemas map to the domain
models in docketclock.models.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

DeadlineRuleKindValue = Literal["calendar_days", "business_days", "months"]

HolidayTypeValue = Literal["fixed", "floating"]

WeekdayValue = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

WEEKDAY_NUMBERS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


# =============================================================================
# Holiday Schema
# =============================================================================

class HolidaySchema(BaseModel):
    """
    Schema for a holiday definition.

    Fixed holidays use month + day; floating holidays use month + weekday
    + occurrence (1-4 or "last").
    """
    key: str = Field(..., description="Stable slug (e.g., 'labor-day')")
    name: str = Field(..., description="Display name")
    type: HolidayTypeValue = Field(..., description="fixed or floating")
    month: int = Field(..., ge=1, le=12, description="Month (1-12)")
    day: Optional[int] = Field(None, ge=1, le=31, description="Day of month (fixed)")
    weekday: Optional[WeekdayValue] = Field(None, description="Weekday name (floating)")
    occurrence: Optional[Union[int, Literal["last"]]] = Field(
        None, description="1-4 or 'last' (floating)"
    )
    start_year: Optional[int] = Field(None, description="First year in force")

    @field_validator("weekday", mode="before")
    @classmethod
    def normalize_weekday(cls, v: Any) -> Any:
        """Accept weekday names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v

    @model_validator(mode="after")
    def validate_structure(self) -> "HolidaySchema":
        """Validate fields required by the holiday type."""
        if self.type == "fixed":
            if self.day is None:
                raise ValueError(f"Fixed holiday '{self.key}' requires 'day'")
            if self.weekday is not None or self.occurrence is not None:
                raise ValueError(
                    f"Fixed holiday '{self.key}' must not set 'weekday' or 'occurrence'"
                )
        else:
            if self.weekday is None or self.occurrence is None:
                raise ValueError(
                    f"Floating holiday '{self.key}' requires 'weekday' and 'occurrence'"
                )
            if self.day is not None:
                raise ValueError(f"Floating holiday '{self.key}' must not set 'day'")
            if self.occurrence != "last" and not 1 <= self.occurrence <= 4:
                raise ValueError(
                    f"Floating holiday '{self.key}' occurrence must be 1-4 or 'last'"
                )
        return self

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Deadline Rule Schema
# =============================================================================

class DeadlineRuleSchema(BaseModel):
    """Schema for a named statutory deadline."""
    id: str = Field(..., description="Unique identifier")
    name: str = Field(..., description="Human-readable name")
    kind: DeadlineRuleKindValue = Field(..., description="Counting rule")
    magnitude: int = Field(..., ge=0, description="Number of days or months")
    description: str = Field("", description="Description")
    authority: Optional[str] = Field(None, description="Statute or rule citation")

    model_config = {
        "extra": "forbid",
    }


# =============================================================================
# Rule Pack Schema
# =============================================================================

class RulePackSchema(BaseModel):
    """
    Schema for a complete rule pack.

    One jurisdiction's holiday table plus its named deadlines.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version")
    id: str = Field(..., description="Unique pack identifier")
    name: str = Field(..., description="Human-readable name")
    jurisdiction: str = Field(..., description="Jurisdiction code (e.g., US-GA)")
    description: str = Field("", description="Pack description")

    # Mark the weekday on which a weekend fixed-date holiday is observed
    observe_weekend_holidays: bool = Field(False)

    holidays: list[HolidaySchema] = Field(
        default_factory=list,
        description="Holiday definitions"
    )
    deadline_rules: list[DeadlineRuleSchema] = Field(
        default_factory=list,
        description="Named statutory deadlines"
    )

    @field_validator("jurisdiction")
    @classmethod
    def validate_jurisdiction(cls, v: str) -> str:
        """Normalize jurisdiction code."""
        return v.upper()

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "RulePackSchema":
        """Reject duplicate holiday keys and rule IDs."""
        errors = []

        seen_keys: set[str] = set()
        for holiday in self.holidays:
            if holiday.key in seen_keys:
                errors.append(f"Duplicate holiday key: '{holiday.key}'")
            seen_keys.add(holiday.key)

        seen_ids: set[str] = set()
        for rule in self.deadline_rules:
            if rule.id in seen_ids:
                errors.append(f"Duplicate deadline rule ID: '{rule.id}'")
            seen_ids.add(rule.id)

        if errors:
            raise ValueError("; ".join(errors))
        return self

    model_config = {
        "extra": "forbid",  # Reject unknown fields
    }


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_rule_pack(data: dict[str, Any]) -> RulePackSchema:
    """
    Validate a rule pack dictionary against the schema.

    Args:
        data: Dictionary loaded from YAML/JSON

    Returns:
        Validated RulePackSchema

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return RulePackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """
    Check if a rule pack's schema version is compatible.

    Args:
        data: Dictionary with schema_version field

    Returns:
        True if compatible, False otherwise
    """
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    # Major version must match
    pack_major = pack_version.split(".")[0]
    current_major = SCHEMA_VERSION.split(".")[0]
    return pack_major == current_major
