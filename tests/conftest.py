"""
Pytest configuration and fixtures for DocketClock tests.

Provides helper factories and common fixtures.
"""
from datetime import date, timedelta
from pathlib import Path

import pytest

from docketclock import GEORGIA_CALENDAR, StatutoryCalendar
from docketclock.models import FixedDateHoliday

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# =============================================================================
# Factory Helpers
# =============================================================================

def iter_days(start: date, end: date):
    """Yield every date from start to end (inclusive)."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def make_pack_data(
    pack_id: str = "test-pack",
    jurisdiction: str = "us-xx",
    holidays: list = None,
    deadline_rules: list = None,
    **extra,
) -> dict:
    """Create a minimal rule pack dictionary."""
    data = {
        "schema_version": "1.0.0",
        "id": pack_id,
        "name": "Test Pack",
        "jurisdiction": jurisdiction,
        "holidays": holidays if holidays is not None else [
            {"key": "new-years-day", "name": "New Year's Day", "type": "fixed", "month": 1, "day": 1},
        ],
        "deadline_rules": deadline_rules if deadline_rules is not None else [
            {"id": "answer", "name": "Answer", "kind": "calendar_days", "magnitude": 30},
        ],
    }
    data.update(extra)
    return data


# =============================================================================
# Common Fixtures
# =============================================================================

@pytest.fixture
def georgia_calendar():
    """Default Georgia holiday calendar."""
    return GEORGIA_CALENDAR


@pytest.fixture
def christmas_only_calendar():
    """Calendar whose only holiday is Christmas Day."""
    return StatutoryCalendar(
        definitions=(FixedDateHoliday("christmas-day", "Christmas Day", 12, 25),),
    )


@pytest.fixture
def georgia_pack_path():
    """Path to the Georgia civil practice rule pack."""
    return FIXTURES_DIR / "packs" / "georgia_civil.yaml"


@pytest.fixture
def today():
    """Fixed reference date for countdown tests."""
    return date(2025, 1, 15)
