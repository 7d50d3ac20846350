"""Timestamp coercion and basic generators.

A timestamp is a ``datetime`` at millisecond resolution. ``datetime`` values
are immutable, so every function here hands back a fresh value and callers
never share state with the library.

Accepted external representations (``TimestampLike``):
- ``datetime`` / ``date``
- ISO 8601 or free-form date strings (dateutil)
- epoch milliseconds (``int`` / ``float``)
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta
from typing import Any, Union

from dateutil import parser as dateutil_parser

from chronofns.errors import InvalidTimestampError

logger = logging.getLogger(__name__)

TimestampLike = Union[datetime, date, str, int, float]


def _truncate_to_millis(value: datetime) -> datetime:
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def _parse_string(value: str) -> datetime:
    try:
        parsed = dateutil_parser.isoparse(value)
    except ValueError:
        try:
            parsed = dateutil_parser.parse(value)
        except (ValueError, OverflowError) as e:
            logger.debug(f"Failed to parse timestamp literal '{value}': {e}")
            raise InvalidTimestampError(value) from e

    # Aware literals are converted to local wall-clock time
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except (ValueError, OverflowError) as e:
            logger.debug(f"Failed to localize timestamp literal '{value}': {e}")
            raise InvalidTimestampError(value) from e
    return parsed


def to_timestamp(value: Any) -> datetime:
    """Convert a TimestampLike value into a new millisecond-resolution datetime.

    Raises:
        InvalidTimestampError: If the value is unparseable or of an
            unsupported type. The error names the offending value.
    """
    if isinstance(value, datetime):
        return _truncate_to_millis(value)

    if isinstance(value, date):
        return datetime.combine(value, time())

    if isinstance(value, str):
        return _truncate_to_millis(_parse_string(value))

    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidTimestampError(value)
        try:
            return _truncate_to_millis(datetime.fromtimestamp(value / 1000))
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestampError(value) from e

    raise InvalidTimestampError(
        value, reason=f"Invalid date type: {type(value).__name__}"
    )


def is_valid(value: Any) -> bool:
    """Check whether a value can be turned into a timestamp."""
    try:
        to_timestamp(value)
    except InvalidTimestampError:
        return False
    return True


def clone(value: TimestampLike) -> datetime:
    """Return a new timestamp equal to ``value``."""
    return to_timestamp(value)


def now() -> datetime:
    """Current local time at millisecond resolution."""
    return _truncate_to_millis(datetime.now())


def today() -> datetime:
    """Today's date at midnight."""
    return now().replace(hour=0, minute=0, second=0, microsecond=0)


def tomorrow() -> datetime:
    """Tomorrow's date at midnight."""
    return today() + timedelta(days=1)


def yesterday() -> datetime:
    """Yesterday's date at midnight."""
    return today() - timedelta(days=1)


def is_equal(a: TimestampLike, b: TimestampLike) -> bool:
    return to_timestamp(a) == to_timestamp(b)


def is_before(a: TimestampLike, b: TimestampLike) -> bool:
    return to_timestamp(a) < to_timestamp(b)


def is_after(a: TimestampLike, b: TimestampLike) -> bool:
    return to_timestamp(a) > to_timestamp(b)
