"""
DocketClock Holiday Models

Static holiday definitions that are resolved against a year to produce
concrete holiday dates.

Two kinds of definition:
- FixedDateHoliday: same month/day every year (e.g., December 25)
- FloatingWeekdayHoliday: Nth weekday of a month, or the last one
  (e.g., 3rd Monday of January, last Monday of May)

Weekdays use Python's convention (0=Monday, 6=Sunday).
"""
from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from typing import Literal, Optional, Union

LAST: Literal["last"] = "last"

Occurrence = Union[int, Literal["last"]]

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


@dataclass(frozen=True)
class FixedDateHoliday:
    """
    A holiday on the same calendar date every year.

    Attributes:
        key: Stable slug (e.g., "christmas-day")
        name: Display name
        month: Month (1-12)
        day: Day of month
        start_year: First year the holiday applies (None = always)
    """
    key: str
    name: str
    month: int
    day: int
    start_year: Optional[int] = None

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be 1-12, got {self.month}")
        # Validate against a leap year so Feb 29 is representable
        if not 1 <= self.day <= monthrange(2000, self.month)[1]:
            raise ValueError(f"day {self.day} does not exist in month {self.month}")

    def applies_to(self, year: int) -> bool:
        """Check whether the holiday is in force for a year."""
        return self.start_year is None or year >= self.start_year

    @property
    def description(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class FloatingWeekdayHoliday:
    """
    A holiday on the Nth (or last) occurrence of a weekday in a month.

    Attributes:
        key: Stable slug (e.g., "labor-day")
        name: Display name
        month: Month (1-12)
        weekday: Day of week (0=Monday, 6=Sunday)
        occurrence: 1-4 counted from the start of the month, or LAST
        start_year: First year the holiday applies (None = always)
    """
    key: str
    name: str
    month: int
    weekday: int
    occurrence: Occurrence
    start_year: Optional[int] = None

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be 1-12, got {self.month}")
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"weekday must be 0-6, got {self.weekday}")
        if self.occurrence != LAST and not (
            isinstance(self.occurrence, int) and 1 <= self.occurrence <= 4
        ):
            raise ValueError(
                f"occurrence must be 1-4 or '{LAST}', got {self.occurrence!r}"
            )

    def applies_to(self, year: int) -> bool:
        """Check whether the holiday is in force for a year."""
        return self.start_year is None or year >= self.start_year

    @property
    def is_last(self) -> bool:
        return self.occurrence == LAST

    @property
    def description(self) -> str:
        day_name = _WEEKDAY_NAMES[self.weekday]
        if self.is_last:
            return f"last {day_name} of month {self.month}"
        return f"{_ORDINALS[self.occurrence]} {day_name} of month {self.month}"


HolidayDefinition = Union[FixedDateHoliday, FloatingWeekdayHoliday]


_WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th"}
