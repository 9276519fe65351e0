"""
DocketClock Rule Packs

Schema validation and loading for rule packs.

Rule packs are YAML or JSON files that define a jurisdiction's holiday
table and its named statutory deadlines. The engine itself only consults
the single calendar it is handed; packs are how another jurisdiction's
calendar is supplied.

Usage:
    from docketclock.packs import load_rule_pack, RulePackLoader

    # Load a single rule pack
    pack = load_rule_pack("path/to/georgia_civil.yaml")
    pack.calculate("answer", "2025-01-15")

    # Use a loader for multiple packs
    loader = RulePackLoader()
    georgia = loader.load("path/to/georgia_civil.yaml")
    loader.get_pack("georgia-civil")
"""
from __future__ import annotations

from .loader import (
    RulePack,
    RulePackLoader,
    load_rule_pack,
    load_rule_pack_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    DeadlineRuleSchema,
    HolidaySchema,
    RulePackSchema,
    check_schema_version,
    validate_rule_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "RulePack",
    "RulePackLoader",
    "load_rule_pack",
    "load_rule_pack_from_string",
    # Validation
    "validate_rule_pack",
    "check_schema_version",
    # Schemas
    "RulePackSchema",
    "HolidaySchema",
    "DeadlineRuleSchema",
]
