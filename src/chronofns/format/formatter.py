"""String formatting for timestamps.

Pattern formatting ("YYYY-MM-DD"), relative descriptions ("3 days ago"),
human-readable dates, clock times, ranges and durations.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from chronofns.core.timestamps import TimestampLike, now, to_timestamp


class DateFormat(str, Enum):
    """Supported ``format_date`` patterns."""

    ISO_DATE = "YYYY-MM-DD"
    US_DATE = "MM/DD/YYYY"
    EU_DATE = "DD/MM/YYYY"
    ISO_DATETIME = "YYYY-MM-DD HH:mm:ss"
    US_DATETIME = "MM/DD/YYYY HH:mm:ss"
    EU_DATETIME = "DD/MM/YYYY HH:mm:ss"


FORMAT_TOKEN_PATTERN = re.compile(r"YYYY|MM|DD|HH|mm|ss")

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Approximate unit lengths for relative descriptions, largest first
RELATIVE_UNITS_MS = (
    ("year", 365 * 24 * 60 * 60 * 1000),
    ("month", 30 * 24 * 60 * 60 * 1000),
    ("week", 7 * 24 * 60 * 60 * 1000),
    ("day", 24 * 60 * 60 * 1000),
    ("hour", 60 * 60 * 1000),
    ("minute", 60 * 1000),
    ("second", 1000),
)

MS_PER_DAY = 24 * 60 * 60 * 1000
MS_PER_HOUR = 60 * 60 * 1000
MS_PER_MINUTE = 60 * 1000


def _millis_between(start: datetime, end: datetime) -> int:
    delta = end - start
    return (delta.days * MS_PER_DAY) + (delta.seconds * 1000) + (delta.microseconds // 1000)


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'s' if value > 1 else ''}"


def format_date(value: TimestampLike, pattern: Union[DateFormat, str]) -> str:
    """Format a timestamp with YYYY/MM/DD/HH/mm/ss tokens."""
    d = to_timestamp(value)
    pattern_text = pattern.value if isinstance(pattern, DateFormat) else pattern
    tokens = {
        "YYYY": f"{d.year:04d}",
        "MM": f"{d.month:02d}",
        "DD": f"{d.day:02d}",
        "HH": f"{d.hour:02d}",
        "mm": f"{d.minute:02d}",
        "ss": f"{d.second:02d}",
    }
    return FORMAT_TOKEN_PATTERN.sub(lambda m: tokens[m.group(0)], pattern_text)


def format_relative(value: TimestampLike, reference: Optional[TimestampLike] = None) -> str:
    """Describe a timestamp relative to ``reference`` (default: now).

    Uses the largest whole unit, e.g. "2 hours ago" or "in 3 days".
    """
    d = to_timestamp(value)
    base = to_timestamp(reference) if reference is not None else now()

    diff = _millis_between(base, d)
    abs_diff = abs(diff)

    for unit, unit_ms in RELATIVE_UNITS_MS:
        amount = abs_diff // unit_ms
        if amount >= 1:
            if diff < 0:
                return f"{_plural(amount, unit)} ago"
            return f"in {_plural(amount, unit)}"

    return "just now"


def format_human(value: TimestampLike) -> str:
    """Format as "Wednesday, July 9, 2025"."""
    d = to_timestamp(value)
    return f"{WEEKDAY_NAMES[d.weekday()]}, {MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


def format_time12(value: TimestampLike) -> str:
    """Format the clock time as "3:30 PM"."""
    d = to_timestamp(value)
    am_pm = "PM" if d.hour >= 12 else "AM"
    hour = d.hour % 12 or 12
    return f"{hour}:{d.minute:02d} {am_pm}"


def format_time24(value: TimestampLike) -> str:
    """Format the clock time as "15:30"."""
    d = to_timestamp(value)
    return f"{d.hour:02d}:{d.minute:02d}"


def format_display(value: TimestampLike, context: str = "medium") -> str:
    """Format for display: short (date), medium (date and time) or long (prose)."""
    d = to_timestamp(value)
    if context == "short":
        return format_date(d, DateFormat.US_DATE)
    if context == "long":
        return f"{format_human(d)} at {format_time12(d)}"
    return format_date(d, DateFormat.US_DATETIME)


def format_range(start: TimestampLike, end: TimestampLike, separator: str = " - ") -> str:
    return f"{format_date(start, DateFormat.US_DATE)}{separator}{format_date(end, DateFormat.US_DATE)}"


def format_duration(start: TimestampLike, end: TimestampLike) -> str:
    """Describe the absolute span between two timestamps in days, hours and minutes."""
    diff = abs(_millis_between(to_timestamp(start), to_timestamp(end)))

    days = diff // MS_PER_DAY
    hours = (diff % MS_PER_DAY) // MS_PER_HOUR
    minutes = (diff % MS_PER_HOUR) // MS_PER_MINUTE

    parts = [
        _plural(amount, unit)
        for amount, unit in ((days, "day"), (hours, "hour"), (minutes, "minute"))
        if amount > 0
    ]
    if not parts:
        return "less than a minute"
    return ", ".join(parts)
