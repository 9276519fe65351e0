"""
Tests for the DocketClock exception hierarchy.
"""
from __future__ import annotations

import pytest

from docketclock import (
    DocketClockError,
    InvalidDateFormat,
    InvalidMagnitude,
    InvalidRuleKind,
    RulePackLoadError,
    RulePackValidationError,
    RulePackVersionMismatch,
    UnknownDeadlineRule,
)


@pytest.mark.parametrize(
    "exc_class, code",
    [
        (InvalidDateFormat, "DC_INVALID_DATE_FORMAT"),
        (InvalidMagnitude, "DC_INVALID_MAGNITUDE"),
        (InvalidRuleKind, "DC_INVALID_RULE_KIND"),
        (UnknownDeadlineRule, "DC_UNKNOWN_RULE"),
        (RulePackLoadError, "DC_PACK_LOAD_ERROR"),
        (RulePackValidationError, "DC_PACK_VALIDATION_ERROR"),
        (RulePackVersionMismatch, "DC_PACK_VERSION_MISMATCH"),
    ],
)
def test_error_codes(exc_class, code: str) -> None:
    error = exc_class(message="boom")
    assert isinstance(error, DocketClockError)
    assert error.code == code
    assert str(error) == f"[{code}] boom"


def test_to_dict_omits_empty_details() -> None:
    assert InvalidMagnitude(message="bad").to_dict() == {
        "code": "DC_INVALID_MAGNITUDE",
        "message": "bad",
    }


def test_to_dict_includes_details() -> None:
    error = InvalidDateFormat(message="bad", details={"value": "2025-02-30"})
    assert error.to_dict()["details"] == {"value": "2025-02-30"}


def test_catchable_as_base_class() -> None:
    with pytest.raises(DocketClockError):
        raise UnknownDeadlineRule(message="missing")
