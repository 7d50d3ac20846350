"""chronofns: natural-language date resolution and calendar math.

Usage:
    from datetime import datetime
    from chronofns import resolve_natural, add_units

    result = resolve_natural("next friday", {"reference_instant": datetime(2025, 7, 9, 15)})
    result.instant, result.confidence  # (datetime(2025, 7, 11, 0, 0), 0.85)
"""

from chronofns.core import (
    TimeUnit,
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_units,
    add_weeks,
    add_years,
    clone,
    day_of_week,
    difference_in,
    difference_in_days,
    difference_in_hours,
    difference_in_minutes,
    difference_in_seconds,
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    is_after,
    is_before,
    is_equal,
    is_same_day,
    is_same_month,
    is_same_week,
    is_same_year,
    is_valid,
    now,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
    subtract_days,
    subtract_hours,
    subtract_minutes,
    subtract_months,
    subtract_units,
    subtract_weeks,
    subtract_years,
    to_timestamp,
    today,
    tomorrow,
    yesterday,
)
from chronofns.errors import (
    CalendarError,
    ChronoError,
    ConfigurationError,
    InvalidConfigError,
    InvalidTimestampError,
    InvalidUnitError,
    MissingConfigError,
    UnknownUnitError,
)
from chronofns.format import (
    DateFormat,
    format_date,
    format_display,
    format_duration,
    format_human,
    format_range,
    format_relative,
    format_time12,
    format_time24,
)
from chronofns.nlp import (
    ParseOptions,
    ParseResult,
    RecognizerKind,
    can_resolve,
    resolve,
    resolve_natural,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Phrase resolution
    "resolve_natural",
    "resolve",
    "can_resolve",
    "ParseOptions",
    "ParseResult",
    "RecognizerKind",
    # Calendar math
    "TimeUnit",
    "add_units",
    "subtract_units",
    "add_days",
    "subtract_days",
    "add_hours",
    "subtract_hours",
    "add_minutes",
    "subtract_minutes",
    "add_weeks",
    "subtract_weeks",
    "add_months",
    "subtract_months",
    "add_years",
    "subtract_years",
    "day_of_week",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "difference_in",
    "difference_in_days",
    "difference_in_hours",
    "difference_in_minutes",
    "difference_in_seconds",
    "is_same_day",
    "is_same_week",
    "is_same_month",
    "is_same_year",
    # Timestamps
    "to_timestamp",
    "is_valid",
    "clone",
    "now",
    "today",
    "tomorrow",
    "yesterday",
    "is_equal",
    "is_before",
    "is_after",
    # Formatting
    "DateFormat",
    "format_date",
    "format_relative",
    "format_human",
    "format_time12",
    "format_time24",
    "format_display",
    "format_range",
    "format_duration",
    # Errors
    "ChronoError",
    "CalendarError",
    "InvalidUnitError",
    "UnknownUnitError",
    "InvalidTimestampError",
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
]
