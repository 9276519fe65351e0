"""
DocketClock Holiday Resolution

Resolves static holiday definitions against a year and provides a
calendar driven by a definition table.

Resolution rules:
- Fixed-date holidays fall on their literal date.
- Floating holidays: Nth weekday counted from the 1st of the month, or
  the last weekday counted back from the final day of the month.

Observed holidays: by default a fixed holiday that falls on a weekend is
NOT shifted to a weekday. Calendars built with observe_weekend_holidays
additionally mark the observed day (Saturday -> Friday, Sunday -> Monday).
"""
from __future__ import annotations

import logging
from calendar import monthrange
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from functools import lru_cache
from typing import Iterable, Optional

from ..models import FixedDateHoliday, HolidayDefinition
from .base import BaseCalendar

logger = logging.getLogger(__name__)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    Get the nth occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        n: Which occurrence (1=first, 2=second, etc.)

    Returns:
        The date of the nth weekday
    """
    first_day = date(year, month, 1)
    days_until_weekday = (weekday - first_day.weekday()) % 7
    first_occurrence = first_day + timedelta(days=days_until_weekday)
    return first_occurrence + timedelta(weeks=n - 1)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """
    Get the last occurrence of a weekday in a month.

    Args:
        year: Year
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)

    Returns:
        The date of the last weekday
    """
    last_day = date(year, month, monthrange(year, month)[1])
    days_since_weekday = (last_day.weekday() - weekday) % 7
    return last_day - timedelta(days=days_since_weekday)


def calculate_observed_holiday(holiday: date) -> date:
    """
    Calculate the observed date for a holiday.

    - Saturday holidays observed on Friday
    - Sunday holidays observed on Monday
    """
    if holiday.weekday() == 5:  # Saturday
        return holiday - timedelta(days=1)
    elif holiday.weekday() == 6:  # Sunday
        return holiday + timedelta(days=1)
    return holiday


def resolve_holiday(definition: HolidayDefinition, year: int) -> Optional[date]:
    """
    Resolve a single holiday definition to its date in a year.

    Returns:
        The holiday date, or None if the holiday is not in force that year
    """
    if not definition.applies_to(year):
        return None

    if isinstance(definition, FixedDateHoliday):
        return date(year, definition.month, definition.day)

    if definition.is_last:
        return last_weekday_of_month(year, definition.month, definition.weekday)
    return nth_weekday_of_month(
        year, definition.month, definition.weekday, definition.occurrence
    )


def holidays_for_year(
    year: int,
    definitions: Iterable[HolidayDefinition],
    observe_weekend_holidays: bool = False,
) -> list[tuple[date, str]]:
    """
    Get all holidays for a year with names.

    Returns list of (date, name) tuples sorted by date.
    """
    holidays = []
    for definition in definitions:
        holiday_date = resolve_holiday(definition, year)
        if holiday_date is None:
            continue
        holidays.append((holiday_date, definition.name))

        if observe_weekend_holidays and isinstance(definition, FixedDateHoliday):
            observed = calculate_observed_holiday(holiday_date)
            if observed != holiday_date:
                holidays.append((observed, f"{definition.name} (Observed)"))

    return sorted(holidays, key=lambda x: x[0])


@lru_cache(maxsize=256)
def resolve_holiday_dates(
    year: int,
    definitions: tuple[HolidayDefinition, ...],
    observe_weekend_holidays: bool = False,
) -> frozenset[date]:
    """
    Resolve a definition table to the set of holiday dates in a year (cached).

    Pure function of its arguments, so memoizing per year is safe. An
    observed date that spills into an adjacent year (New Year's Day on a
    Saturday observed on December 31) is kept in the set of the year that
    owns the holiday; `StatutoryCalendar.is_holiday` checks both years.
    """
    dates = frozenset(
        d for d, _ in holidays_for_year(year, definitions, observe_weekend_holidays)
    )
    logger.debug("Resolved %d holiday dates for %d", len(dates), year)
    return dates


@dataclass(frozen=True)
class StatutoryCalendar(BaseCalendar):
    """
    Holiday calendar driven by a static table of holiday definitions.

    Usage:
        calendar = StatutoryCalendar(definitions=georgia_holiday_definitions())
        calendar.is_business_day(date(2025, 1, 20))   # False (MLK Day)
    """

    definitions: tuple[HolidayDefinition, ...] = ()

    # Also mark the weekday on which a weekend fixed-date holiday is observed
    observe_weekend_holidays: bool = False

    def holiday_dates(self, year: int) -> frozenset[date]:
        """Get the set of holiday dates owned by a year."""
        return resolve_holiday_dates(
            year, self.definitions, self.observe_weekend_holidays
        )

    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday under this calendar."""
        if d in self.holiday_dates(d.year):
            return True
        if self.observe_weekend_holidays and d.month in (1, 12):
            # Observed dates can cross a year boundary
            neighbour = d.year + 1 if d.month == 12 else d.year - 1
            if MINYEAR <= neighbour <= MAXYEAR:
                return d in self.holiday_dates(neighbour)
        return False

    def get_holiday_name(self, d: date) -> Optional[str]:
        """
        Get the name of a holiday on a given date.

        Args:
            d: Date to check

        Returns:
            Holiday name if it's a holiday, None otherwise
        """
        for year in (d.year, d.year - 1, d.year + 1):
            if not MINYEAR <= year <= MAXYEAR:
                continue
            for holiday_date, name in self.get_holidays_for_year(year):
                if holiday_date == d:
                    return name
        return None

    def get_holidays_for_year(self, year: int) -> list[tuple[date, str]]:
        """Get all holidays for a year with names, sorted by date."""
        return holidays_for_year(
            year, self.definitions, self.observe_weekend_holidays
        )
