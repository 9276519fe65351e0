"""
DocketClock Rule Pack Loader

Loads and validates rule packs from YAML or JSON files.

Converts Pydantic schema models to DocketClock domain models and wraps
them in a RulePack bound to its own holiday calendar.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars import DateInput, StatutoryCalendar
from ..engine import DeadlineCalculator
from ..exceptions import RulePackLoadError, RulePackValidationError, RulePackVersionMismatch
from ..models import (
    LAST,
    DeadlineRule,
    DeadlineRuleKind,
    FixedDateHoliday,
    FloatingWeekdayHoliday,
    HolidayDefinition,
)
from .schema import (
    SCHEMA_VERSION,
    WEEKDAY_NUMBERS,
    DeadlineRuleSchema,
    HolidaySchema,
    RulePackSchema,
    check_schema_version,
    validate_rule_pack,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Rule Pack
# =============================================================================

@dataclass(frozen=True)
class RulePack:
    """
    A jurisdiction's holiday calendar and named deadlines.

    Usage:
        pack = load_rule_pack("packs/georgia_civil.yaml")
        pack.calculate("answer", "2024-12-20")   # "2025-01-21"
    """
    id: str
    name: str
    jurisdiction: str
    calendar: StatutoryCalendar
    rules: dict[str, DeadlineRule] = field(default_factory=dict)
    description: str = ""
    schema_version: str = SCHEMA_VERSION

    def calculator(self, reference_date: Optional[date] = None) -> DeadlineCalculator:
        """Get a DeadlineCalculator bound to this pack's calendar and rules."""
        return DeadlineCalculator(
            calendar=self.calendar,
            rules=self.rules,
            reference_date=reference_date,
        )

    def calculate(self, rule_id: str, trigger_date: DateInput) -> str:
        """Calculate a named deadline from its trigger date."""
        return self.calculator().calculate(rule_id, trigger_date)

    def list_rules(self) -> list[str]:
        """List IDs of all rules in the pack."""
        return sorted(self.rules)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_holiday(schema: HolidaySchema) -> HolidayDefinition:
    """Convert HolidaySchema to a holiday definition."""
    if schema.type == "fixed":
        return FixedDateHoliday(
            key=schema.key,
            name=schema.name,
            month=schema.month,
            day=schema.day,
            start_year=schema.start_year,
        )
    return FloatingWeekdayHoliday(
        key=schema.key,
        name=schema.name,
        month=schema.month,
        weekday=WEEKDAY_NUMBERS[schema.weekday],
        occurrence=LAST if schema.occurrence == "last" else schema.occurrence,
        start_year=schema.start_year,
    )


def _convert_deadline_rule(schema: DeadlineRuleSchema) -> DeadlineRule:
    """Convert DeadlineRuleSchema to DeadlineRule model."""
    return DeadlineRule(
        id=schema.id,
        name=schema.name,
        kind=DeadlineRuleKind(schema.kind),
        magnitude=schema.magnitude,
        description=schema.description,
        authority=schema.authority,
    )


def _convert_rule_pack(schema: RulePackSchema) -> RulePack:
    """Convert RulePackSchema to RulePack."""
    try:
        definitions = tuple(_convert_holiday(h) for h in schema.holidays)
    except ValueError as e:
        # e.g. February 30 passes the schema's 1-31 bound
        raise RulePackValidationError(
            message=f"Invalid holiday definition in pack '{schema.id}': {e}",
            details={"pack_id": schema.id, "error": str(e)},
        ) from e

    if not definitions:
        logger.warning(
            "Rule pack '%s' defines no holidays; only weekends will be skipped",
            schema.id,
        )

    return RulePack(
        id=schema.id,
        name=schema.name,
        jurisdiction=schema.jurisdiction,
        description=schema.description,
        schema_version=schema.schema_version,
        calendar=StatutoryCalendar(
            definitions=definitions,
            observe_weekend_holidays=schema.observe_weekend_holidays,
        ),
        rules={r.id: _convert_deadline_rule(r) for r in schema.deadline_rules},
    )


# =============================================================================
# Rule Pack Loader
# =============================================================================

class RulePackLoader:
    """
    Loads rule packs from YAML or JSON files.

    Usage:
        loader = RulePackLoader()
        pack = loader.load("path/to/georgia_civil.yaml")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version

        # Loaded packs by ID
        self._packs: dict[str, RulePack] = {}

    def load(self, path: Union[str, Path]) -> RulePack:
        """
        Load a rule pack from a file.

        Args:
            path: Path to YAML or JSON file

        Returns:
            Loaded RulePack

        Raises:
            RulePackLoadError: If file cannot be read
            RulePackValidationError: If validation fails
            RulePackVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise RulePackLoadError(
                message=f"Failed to load rule pack: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        pack = self.load_data(data, source=str(path))
        logger.info(
            "Loaded rule pack '%s' (%d holidays, %d rules) from %s",
            pack.id,
            len(pack.calendar.definitions),
            len(pack.rules),
            path,
        )
        return pack

    def load_data(self, data: Any, source: str = "<data>") -> RulePack:
        """
        Validate and convert an already-parsed rule pack.

        Args:
            data: Dictionary loaded from YAML/JSON
            source: Where the data came from, for error details

        Returns:
            Loaded RulePack
        """
        if not isinstance(data, dict):
            raise RulePackLoadError(
                message="Rule pack must be a mapping at the top level",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise RulePackVersionMismatch(
                message=f"Schema version mismatch: pack has {pack_version}, expected {SCHEMA_VERSION}",
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_rule_pack(data)
        except ValidationError as e:
            raise RulePackValidationError(
                message=f"Rule pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "source": source},
            ) from e

        pack = _convert_rule_pack(schema)
        self._packs[pack.id] = pack
        return pack

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            # YAML is a superset of JSON
            return yaml.safe_load(f)

    def get_pack(self, pack_id: str) -> Optional[RulePack]:
        """Get a loaded pack by ID."""
        return self._packs.get(pack_id)

    def list_packs(self) -> list[str]:
        """List IDs of all loaded packs."""
        return list(self._packs.keys())


# =============================================================================
# Convenience Functions
# =============================================================================

def load_rule_pack(path: Union[str, Path]) -> RulePack:
    """
    Load a rule pack from a file.

    Convenience function that creates a temporary loader.
    """
    loader = RulePackLoader()
    return loader.load(path)


def load_rule_pack_from_string(
    content: str,
    format: str = "yaml",
) -> RulePack:
    """
    Load a rule pack from a string.

    Args:
        content: YAML or JSON string
        format: "yaml" or "json"

    Returns:
        Loaded RulePack
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise RulePackLoadError(
            message=f"Failed to parse rule pack: {e}",
            details={"format": format, "error": str(e)},
        ) from e

    return RulePackLoader().load_data(data, source=f"<{format} string>")
