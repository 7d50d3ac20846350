"""Natural-language date resolution.

``resolve_natural`` normalizes the input (strip, lowercase), tries each
recognizer in a fixed priority order and returns the first success. When
none match it falls back to a generic date-literal parse of the original
input (confidence 0.50) unless strict mode is on, and otherwise reports an
empty result with confidence 0.

The resolver never raises for text input and holds no state between calls.

Example:
    >>> from datetime import datetime
    >>> result = resolve_natural(
    ...     "next monday",
    ...     {"reference_instant": datetime(2025, 7, 9, 15, 0)},
    ... )
    >>> result.instant
    datetime.datetime(2025, 7, 14, 0, 0)
    >>> result.confidence
    0.85
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import partial
from typing import Any, Mapping, Optional, Tuple, Union

from dateutil import parser as dateutil_parser

from chronofns.core.calendar import start_of_day
from chronofns.nlp.models import (
    ParseOptions,
    ParseResult,
    RecognizerKind,
)
from chronofns.nlp.recognizers import (
    Recognizer,
    recognize_period_boundary,
    recognize_relative_keyword,
    recognize_relative_offset,
    recognize_time_of_day,
    recognize_weekday,
)

logger = logging.getLogger(__name__)

OptionsLike = Union[ParseOptions, Mapping[str, Any], None]


def recognizer_chain(week_start_day: int = 0) -> Tuple[Recognizer, ...]:
    """Recognizers in priority order; the first success wins."""
    return (
        recognize_relative_keyword,
        recognize_relative_offset,
        recognize_weekday,
        partial(recognize_period_boundary, week_start_day=week_start_day),
        recognize_time_of_day,
    )


def _coerce_options(options: OptionsLike) -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions.model_validate(dict(options))


def parse_literal(text: str, reference: datetime) -> Optional[datetime]:
    """Interpret ``text`` as an absolute date/time literal.

    Fields missing from the literal are taken from the reference date at
    midnight. Returns None when dateutil cannot find a date.
    """
    try:
        parsed = dateutil_parser.parse(text, default=start_of_day(reference))
        # Keep naive references comparable with the result
        if reference.tzinfo is None and parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Literal fallback failed for '{text}': {e}")
        return None

    return parsed.replace(microsecond=(parsed.microsecond // 1000) * 1000)


def resolve_natural(text: str, options: OptionsLike = None) -> ParseResult:
    """Resolve a natural-language date phrase.

    Args:
        text: Free-text phrase such as "tomorrow" or "3 days ago"
        options: ParseOptions, or a mapping of its fields
            (reference_instant, strict, week_start_day)

    Returns:
        ParseResult with the resolved instant, its confidence tier and the
        matched/remaining spans of the normalized input
    """
    opts = _coerce_options(options)
    reference = opts.resolve_reference()
    normalized = text.strip().lower()

    for recognizer in recognizer_chain(opts.week_start_day):
        try:
            result = recognizer(normalized, reference)
        except (OverflowError, ValueError) as e:
            logger.debug(f"Recognizer failed on '{normalized}': {e}")
            continue
        if result.succeeded:
            return result

    if opts.strict:
        logger.debug(f"Strict mode, skipping literal fallback for '{normalized}'")
        return ParseResult.no_match(normalized)

    instant = parse_literal(text, reference)
    if instant is not None:
        logger.debug(f"Literal fallback parsed '{text}' as {instant.isoformat()}")
        return ParseResult(
            instant=instant,
            confidence=RecognizerKind.FALLBACK.confidence,
            matched=text,
            remaining="",
            kind=RecognizerKind.FALLBACK,
        )

    return ParseResult.no_match(normalized)


def resolve(text: str, options: OptionsLike = None) -> Optional[datetime]:
    """Return just the resolved instant, or None."""
    return resolve_natural(text, options).instant


def can_resolve(text: str, options: OptionsLike = None) -> bool:
    """Check whether a phrase resolves with more than fallback-tier confidence."""
    return resolve_natural(text, options).trusted
