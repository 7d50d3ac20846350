"""Time units understood by the calendar functions."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class TimeUnit(str, Enum):
    """Units accepted by add/subtract/difference.

    Millisecond through week are fixed durations; month and year are
    calendar fields.
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_calendar_field(self) -> bool:
        return self in (TimeUnit.MONTH, TimeUnit.YEAR)


UnitLike = Union[TimeUnit, str]

# Fixed-duration units expressed in milliseconds
UNIT_MILLISECONDS = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: 1000,
    TimeUnit.MINUTE: 60 * 1000,
    TimeUnit.HOUR: 60 * 60 * 1000,
    TimeUnit.DAY: 24 * 60 * 60 * 1000,
    TimeUnit.WEEK: 7 * 24 * 60 * 60 * 1000,
}


def coerce_unit(unit: UnitLike) -> Optional[TimeUnit]:
    """Return the TimeUnit for ``unit`` or None if it is not one of the eight."""
    if isinstance(unit, TimeUnit):
        return unit
    if not isinstance(unit, str):
        return None
    try:
        return TimeUnit(unit)
    except ValueError:
        return None


def normalize_unit_word(word: str) -> Optional[TimeUnit]:
    """Map a phrase word like "Days" or "hour" to its TimeUnit."""
    normalized = word.lower()
    if normalized.endswith("s"):
        normalized = normalized[:-1]
    return coerce_unit(normalized)
