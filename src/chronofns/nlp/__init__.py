"""Natural-language date resolution.

An ordered chain of phrase recognizers with fixed confidence tiers:
- Relative keywords (today, tomorrow, yesterday, now)
- Relative offsets (in 2 hours, 3 days ago)
- Weekday references (next monday, last friday)
- Period boundaries (start of the month, end of week)
- Fixed time of day (noon, midnight)
- Generic date-literal fallback (skipped in strict mode)
"""

from chronofns.nlp.models import (
    CONFIDENCE_TIERS,
    ParseOptions,
    ParseResult,
    RecognizerKind,
)
from chronofns.nlp.recognizers import (
    recognize_period_boundary,
    recognize_relative_keyword,
    recognize_relative_offset,
    recognize_time_of_day,
    recognize_weekday,
    resolve_weekday,
)
from chronofns.nlp.resolver import (
    can_resolve,
    parse_literal,
    recognizer_chain,
    resolve,
    resolve_natural,
)

__all__ = [
    # Models
    "CONFIDENCE_TIERS",
    "ParseOptions",
    "ParseResult",
    "RecognizerKind",
    # Recognizers
    "recognize_relative_keyword",
    "recognize_relative_offset",
    "recognize_weekday",
    "recognize_period_boundary",
    "recognize_time_of_day",
    "resolve_weekday",
    # Resolver
    "recognizer_chain",
    "parse_literal",
    "resolve_natural",
    "resolve",
    "can_resolve",
]
