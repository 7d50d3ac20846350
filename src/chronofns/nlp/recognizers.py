"""Phrase recognizers for natural-language date resolution.

Each recognizer is a plain function ``(text, reference) -> ParseResult`` that
tries one phrase family against already-normalized text (stripped and
lowercased). A recognizer either returns a result carrying its family's
confidence tier, or ``ParseResult.no_match(text)``. Recognizers share no
state, so the resolver can chain them in any fixed order.

Families, in chain order:
- Relative keywords: today, now, tomorrow, yesterday (0.95)
- Relative offsets: "in 3 days", "2 hours from now", "5 weeks ago" (0.90)
- Weekday references: "next monday", "last friday", "this saturday" (0.85)
- Period boundaries: "start of the month", "end of week" (0.80)
- Fixed time of day: noon, midnight (0.75)
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Tuple

from chronofns.core.calendar import (
    add_units,
    day_of_week,
    end_of_month,
    end_of_week,
    start_of_day,
    start_of_month,
    start_of_week,
    subtract_units,
)
from chronofns.core.units import normalize_unit_word
from chronofns.nlp.models import ParseResult, RecognizerKind

logger = logging.getLogger(__name__)

Recognizer = Callable[[str, datetime], ParseResult]


# ---------------------------------------------------------------------------
# Regular Expression Patterns
# ---------------------------------------------------------------------------

_UNIT_WORDS = r"(milliseconds?|seconds?|minutes?|hours?|days?|weeks?|months?|years?)"

# Keywords may be followed by unrelated trailing text
TODAY_PATTERN = re.compile(r"^(today|now)(?:\s+|$)", re.IGNORECASE)
TOMORROW_PATTERN = re.compile(r"^tomorrow(?:\s+|$)", re.IGNORECASE)
YESTERDAY_PATTERN = re.compile(r"^yesterday(?:\s+|$)", re.IGNORECASE)

# "in N units", "N units from now", "N units ahead", bare "N units"
OFFSET_FUTURE_PATTERN = re.compile(
    r"^(?:in\s+)?(\d+)\s+" + _UNIT_WORDS + r"(?:\s+(?:from\s+now|ahead))?$",
    re.IGNORECASE,
)
# "N units ago"
OFFSET_PAST_PATTERN = re.compile(
    r"^(\d+)\s+" + _UNIT_WORDS + r"\s+ago$",
    re.IGNORECASE,
)

WEEKDAYS = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)
WEEKDAY_PATTERN = re.compile(
    r"^(next|last|this)\s+(" + "|".join(WEEKDAYS) + r")$",
    re.IGNORECASE,
)

START_OF_MONTH_PATTERN = re.compile(r"^(?:beginning|start)\s+of\s+(?:the\s+)?month$", re.IGNORECASE)
END_OF_MONTH_PATTERN = re.compile(r"^end\s+of\s+(?:the\s+)?month$", re.IGNORECASE)
START_OF_WEEK_PATTERN = re.compile(r"^(?:beginning|start)\s+of\s+(?:the\s+)?week$", re.IGNORECASE)
END_OF_WEEK_PATTERN = re.compile(r"^end\s+of\s+(?:the\s+)?week$", re.IGNORECASE)

NOON_PATTERN = re.compile(r"^noon$", re.IGNORECASE)
MIDNIGHT_PATTERN = re.compile(r"^midnight$", re.IGNORECASE)

TIME_OF_DAY_HOURS: Tuple[Tuple[re.Pattern, int], ...] = (
    (NOON_PATTERN, 12),
    (MIDNIGHT_PATTERN, 0),
)


def _result(
    kind: RecognizerKind,
    instant: datetime,
    match: re.Match,
    text: str,
) -> ParseResult:
    """Build a successful result from an anchored match."""
    logger.debug(f"{kind.value} recognizer matched '{match.group(0).strip()}'")
    return ParseResult(
        instant=instant,
        confidence=kind.confidence,
        matched=match.group(0).strip(),
        remaining=text.replace(match.group(0), "", 1).strip(),
        kind=kind,
    )


# ---------------------------------------------------------------------------
# Recognizers
# ---------------------------------------------------------------------------


def recognize_relative_keyword(text: str, reference: datetime) -> ParseResult:
    """Parse today/now/tomorrow/yesterday as midnights around the reference day."""
    midnight = start_of_day(reference)
    offsets = (
        (TODAY_PATTERN, 0),
        (TOMORROW_PATTERN, 1),
        (YESTERDAY_PATTERN, -1),
    )

    for pattern, offset_days in offsets:
        match = pattern.match(text)
        if match:
            instant = midnight + timedelta(days=offset_days)
            return _result(RecognizerKind.KEYWORD, instant, match, text)

    return ParseResult.no_match(text)


def recognize_relative_offset(text: str, reference: datetime) -> ParseResult:
    """Parse 'in 2 hours', '5 minutes from now', '3 days ago'.

    The offset is applied to the reference instant itself, keeping its time
    of day. An amount of 0 returns the reference unchanged.
    """
    for pattern, apply in (
        (OFFSET_FUTURE_PATTERN, add_units),
        (OFFSET_PAST_PATTERN, subtract_units),
    ):
        match = pattern.match(text)
        if not match:
            continue

        amount = int(match.group(1))
        unit = normalize_unit_word(match.group(2))
        if unit is None:  # pragma: no cover - the pattern only admits known units
            return ParseResult.no_match(text)

        instant = apply(reference, amount, unit)
        return _result(RecognizerKind.OFFSET, instant, match, text)

    return ParseResult.no_match(text)


def resolve_weekday(modifier: str, target_day: int, reference: datetime) -> datetime:
    """Resolve a (next|last|this) weekday reference to a midnight.

    - next: strictly after the reference day (a week ahead on a same-day match)
    - last: strictly before the reference day
    - this: the nearest occurrence on or after the reference day
    """
    delta = target_day - day_of_week(reference)

    if modifier == "next":
        if delta <= 0:
            delta += 7
    elif modifier == "last":
        if delta >= 0:
            delta -= 7
    elif modifier == "this":
        if delta < 0:
            delta += 7
    else:
        raise ValueError(f"Unknown weekday modifier: {modifier}")

    return start_of_day(reference) + timedelta(days=delta)


def recognize_weekday(text: str, reference: datetime) -> ParseResult:
    """Parse 'next monday', 'last friday', 'this saturday'."""
    match = WEEKDAY_PATTERN.match(text)
    if not match:
        return ParseResult.no_match(text)

    modifier = match.group(1).lower()
    target_day = WEEKDAYS.index(match.group(2).lower())
    instant = resolve_weekday(modifier, target_day, reference)
    return _result(RecognizerKind.WEEKDAY, instant, match, text)


def recognize_period_boundary(
    text: str,
    reference: datetime,
    week_start_day: int = 0,
) -> ParseResult:
    """Parse beginning/start/end of the month or week."""
    boundaries = (
        (START_OF_MONTH_PATTERN, lambda: start_of_month(reference)),
        (END_OF_MONTH_PATTERN, lambda: end_of_month(reference)),
        (START_OF_WEEK_PATTERN, lambda: start_of_week(reference, week_start_day)),
        (END_OF_WEEK_PATTERN, lambda: end_of_week(reference, week_start_day)),
    )

    for pattern, boundary in boundaries:
        match = pattern.match(text)
        if match:
            return _result(RecognizerKind.PERIOD, boundary(), match, text)

    return ParseResult.no_match(text)


def recognize_time_of_day(text: str, reference: datetime) -> ParseResult:
    """Parse noon and midnight on the reference date."""
    for pattern, hour in TIME_OF_DAY_HOURS:
        match = pattern.match(text)
        if match:
            instant = reference.replace(hour=hour, minute=0, second=0, microsecond=0)
            return _result(RecognizerKind.TIME_OF_DAY, instant, match, text)

    return ParseResult.no_match(text)
