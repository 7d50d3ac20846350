"""Calendar math: unit arithmetic, period boundaries, and differences.

All functions are pure. Inputs are coerced with ``to_timestamp`` and a new
``datetime`` is returned; nothing is mutated in place.

Month and year arithmetic shifts the calendar field and lets day overflow
roll forward into the following month, so Jan 31 + 1 month lands on Mar 3
(Mar 2 in a leap year). The result is never clamped to the last valid day.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from chronofns.core.timestamps import TimestampLike, to_timestamp
from chronofns.core.units import (
    UNIT_MILLISECONDS,
    TimeUnit,
    UnitLike,
    coerce_unit,
)
from chronofns.errors import InvalidUnitError, UnknownUnitError

ONE_MILLISECOND = timedelta(milliseconds=1)


# ---------------------------------------------------------------------------
# Unit Arithmetic
# ---------------------------------------------------------------------------


def _shift_months(timestamp: datetime, months: int) -> datetime:
    """Shift the month field, rolling day overflow into the next month."""
    anchor = timestamp.replace(day=1) + relativedelta(months=months)
    return anchor + timedelta(days=timestamp.day - 1)


def add_units(date: TimestampLike, amount: int, unit: UnitLike) -> datetime:
    """Add a signed ``amount`` of ``unit`` to a timestamp.

    Args:
        date: Base timestamp
        amount: Signed number of units (0 returns an equal timestamp)
        unit: One of the eight TimeUnit values

    Returns:
        New timestamp

    Raises:
        InvalidUnitError: If ``unit`` is not a recognized TimeUnit
    """
    resolved = coerce_unit(unit)
    if resolved is None:
        raise InvalidUnitError(unit)

    result = to_timestamp(date)

    if resolved.is_calendar_field:
        months = amount * 12 if resolved is TimeUnit.YEAR else amount
        return _shift_months(result, months)
    return result + timedelta(milliseconds=amount * UNIT_MILLISECONDS[resolved])


def subtract_units(date: TimestampLike, amount: int, unit: UnitLike) -> datetime:
    """Subtract a signed ``amount`` of ``unit`` from a timestamp."""
    return add_units(date, -amount, unit)


def add_days(date: TimestampLike, days: int) -> datetime:
    return add_units(date, days, TimeUnit.DAY)


def subtract_days(date: TimestampLike, days: int) -> datetime:
    return subtract_units(date, days, TimeUnit.DAY)


def add_hours(date: TimestampLike, hours: int) -> datetime:
    return add_units(date, hours, TimeUnit.HOUR)


def subtract_hours(date: TimestampLike, hours: int) -> datetime:
    return subtract_units(date, hours, TimeUnit.HOUR)


def add_minutes(date: TimestampLike, minutes: int) -> datetime:
    return add_units(date, minutes, TimeUnit.MINUTE)


def subtract_minutes(date: TimestampLike, minutes: int) -> datetime:
    return subtract_units(date, minutes, TimeUnit.MINUTE)


def add_weeks(date: TimestampLike, weeks: int) -> datetime:
    return add_units(date, weeks, TimeUnit.WEEK)


def subtract_weeks(date: TimestampLike, weeks: int) -> datetime:
    return subtract_units(date, weeks, TimeUnit.WEEK)


def add_months(date: TimestampLike, months: int) -> datetime:
    return add_units(date, months, TimeUnit.MONTH)


def subtract_months(date: TimestampLike, months: int) -> datetime:
    return subtract_units(date, months, TimeUnit.MONTH)


def add_years(date: TimestampLike, years: int) -> datetime:
    return add_units(date, years, TimeUnit.YEAR)


def subtract_years(date: TimestampLike, years: int) -> datetime:
    return subtract_units(date, years, TimeUnit.YEAR)


# ---------------------------------------------------------------------------
# Period Boundaries
# ---------------------------------------------------------------------------


def day_of_week(date: TimestampLike) -> int:
    """Weekday index with 0 = Sunday through 6 = Saturday."""
    return (to_timestamp(date).weekday() + 1) % 7


def _check_week_start(week_start_day: int) -> None:
    if not 0 <= week_start_day <= 6:
        raise ValueError(f"week_start_day must be 0-6, got {week_start_day}")


def start_of_day(date: TimestampLike) -> datetime:
    return to_timestamp(date).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(date: TimestampLike) -> datetime:
    return to_timestamp(date).replace(hour=23, minute=59, second=59, microsecond=999000)


def start_of_week(date: TimestampLike, week_start_day: int = 0) -> datetime:
    """Midnight of the configured weekday at or before ``date``."""
    _check_week_start(week_start_day)
    result = start_of_day(date)
    day = day_of_week(result)
    diff = (7 if day < week_start_day else 0) + day - week_start_day
    return result - timedelta(days=diff)


def end_of_week(date: TimestampLike, week_start_day: int = 0) -> datetime:
    return end_of_day(start_of_week(date, week_start_day) + timedelta(days=6))


def start_of_month(date: TimestampLike) -> datetime:
    return start_of_day(to_timestamp(date).replace(day=1))


def end_of_month(date: TimestampLike) -> datetime:
    return start_of_month(date) + relativedelta(months=1) - ONE_MILLISECOND


def start_of_year(date: TimestampLike) -> datetime:
    return start_of_day(to_timestamp(date).replace(month=1, day=1))


def end_of_year(date: TimestampLike) -> datetime:
    return end_of_day(to_timestamp(date).replace(month=12, day=31))


# ---------------------------------------------------------------------------
# Differences
# ---------------------------------------------------------------------------


def difference_in(a: TimestampLike, b: TimestampLike, unit: UnitLike) -> int:
    """Signed difference ``a - b`` in whole units.

    Fixed-duration units floor-divide the millisecond difference. Month and
    year subtract calendar fields and ignore the day/time remainder.

    Raises:
        UnknownUnitError: If ``unit`` is not a recognized TimeUnit
    """
    resolved = coerce_unit(unit)
    if resolved is None:
        raise UnknownUnitError(unit)

    date_a = to_timestamp(a)
    date_b = to_timestamp(b)

    if resolved.is_calendar_field:
        months = (date_a.year - date_b.year) * 12 + (date_a.month - date_b.month)
        return date_a.year - date_b.year if resolved is TimeUnit.YEAR else months

    diff_ms = (date_a - date_b) // ONE_MILLISECOND
    return diff_ms // UNIT_MILLISECONDS[resolved]


def difference_in_days(a: TimestampLike, b: TimestampLike) -> int:
    """Calendar days between the two dates, ignoring the time of day."""
    return (start_of_day(a) - start_of_day(b)).days


def difference_in_hours(a: TimestampLike, b: TimestampLike) -> int:
    return difference_in(a, b, TimeUnit.HOUR)


def difference_in_minutes(a: TimestampLike, b: TimestampLike) -> int:
    return difference_in(a, b, TimeUnit.MINUTE)


def difference_in_seconds(a: TimestampLike, b: TimestampLike) -> int:
    return difference_in(a, b, TimeUnit.SECOND)


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def is_same_day(a: TimestampLike, b: TimestampLike) -> bool:
    return to_timestamp(a).date() == to_timestamp(b).date()


def is_same_week(a: TimestampLike, b: TimestampLike, week_start_day: int = 0) -> bool:
    return start_of_week(a, week_start_day) == start_of_week(b, week_start_day)


def is_same_month(a: TimestampLike, b: TimestampLike) -> bool:
    date_a = to_timestamp(a)
    date_b = to_timestamp(b)
    return (date_a.year, date_a.month) == (date_b.year, date_b.month)


def is_same_year(a: TimestampLike, b: TimestampLike) -> bool:
    return to_timestamp(a).year == to_timestamp(b).year
