"""
DocketClock Holiday Calendar Base

Provides the protocol and base implementation for holiday calendars
used in business day classification.

The calendar system is pluggable: the engine consults whichever
holiday table it is given, so other jurisdictions are configured by
supplying a different calendar (see docketclock.packs).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol, runtime_checkable

from .dates import WEEKEND_DAYS

_ALL_WEEKDAYS = frozenset(range(7))


@runtime_checkable
class HolidayCalendar(Protocol):
    """
    Protocol for holiday calendars.

    Implementations must provide methods to check if a date is a holiday
    or business day.
    """

    def is_holiday(self, d: date) -> bool:
        """
        Check if a date is a holiday.

        Args:
            d: Date to check

        Returns:
            True if the date is a holiday, False otherwise
        """
        ...

    def is_weekend(self, d: date) -> bool:
        """Check if a date falls on a weekend."""
        ...

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a business day.

        A business day is a day that is neither a weekend day nor a holiday.
        """
        ...

    def next_business_day(self, d: date) -> date:
        """Get the first business day on or after a date."""
        ...


@dataclass(frozen=True)
class BaseCalendar(ABC):
    """
    Abstract base class for holiday calendars.

    Provides common functionality for business day classification.
    Subclasses must implement `is_holiday()`.
    """

    # Weekend days (0=Monday, 6=Sunday)
    weekend_days: frozenset[int] = field(default=WEEKEND_DAYS)

    def __post_init__(self) -> None:
        if not set(self.weekend_days) <= _ALL_WEEKDAYS:
            raise ValueError(
                f"weekend_days must be weekday numbers 0-6, got {sorted(self.weekend_days)}"
            )
        if set(self.weekend_days) == _ALL_WEEKDAYS:
            raise ValueError("weekend_days must leave at least one business weekday")

    @abstractmethod
    def is_holiday(self, d: date) -> bool:
        """Check if a date is a holiday."""
        ...

    def is_weekend(self, d: date) -> bool:
        """Check if a date is a weekend day."""
        return d.weekday() in self.weekend_days

    def is_business_day(self, d: date) -> bool:
        """
        Check if a date is a business day.

        A business day is a weekday that is not a holiday.
        """
        if self.is_weekend(d):
            return False
        return not self.is_holiday(d)

    def get_holidays_in_range(self, start: date, end: date) -> list[date]:
        """Get all holidays within a date range (both ends inclusive)."""
        holidays = []
        current = start
        while current <= end:
            if self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def business_days_between(self, start: date, end: date) -> int:
        """
        Count business days between two dates.

        Args:
            start: Start date (exclusive)
            end: End date (inclusive)

        Returns:
            Number of business days between the dates
        """
        if start >= end:
            return 0

        count = 0
        current = start + timedelta(days=1)

        while current <= end:
            if self.is_business_day(current):
                count += 1
            current += timedelta(days=1)

        return count

    def next_business_day(self, d: date) -> date:
        """
        Get the next business day on or after a date.

        If the given date is a business day, returns it.
        Otherwise, rolls forward one day at a time until one is reached.
        """
        current = d
        while not self.is_business_day(current):
            current += timedelta(days=1)
        return current

    def previous_business_day(self, d: date) -> date:
        """
        Get the previous business day on or before a date.

        If the given date is a business day, returns it.
        """
        current = d
        while not self.is_business_day(current):
            current -= timedelta(days=1)
        return current


@dataclass(frozen=True)
class NoHolidayCalendar(BaseCalendar):
    """
    A calendar with no holidays.

    Only weekends are non-business days.
    """

    def is_holiday(self, d: date) -> bool:
        """No holidays in this calendar."""
        return False


@dataclass(frozen=True)
class FixedHolidayCalendar(BaseCalendar):
    """
    A calendar with a fixed set of holiday dates.

    Used when the caller supplies an explicit holiday set.
    """

    holidays: frozenset[date] = field(default_factory=frozenset)

    def is_holiday(self, d: date) -> bool:
        """Check if date is in the fixed holiday set."""
        return d in self.holidays

    @classmethod
    def from_dates(cls, *dates: date) -> FixedHolidayCalendar:
        """Create a calendar from a list of holiday dates."""
        return cls(holidays=frozenset(dates))
