"""Calendar math and timestamp primitives.

No natural-language awareness lives here; the phrase resolver in
``chronofns.nlp`` calls into these functions.
"""

from chronofns.core.calendar import (
    add_days,
    add_hours,
    add_minutes,
    add_months,
    add_units,
    add_weeks,
    add_years,
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
    is_same_day,
    is_same_month,
    is_same_week,
    is_same_year,
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
)
from chronofns.core.timestamps import (
    TimestampLike,
    clone,
    is_after,
    is_before,
    is_equal,
    is_valid,
    now,
    to_timestamp,
    today,
    tomorrow,
    yesterday,
)
from chronofns.core.units import TimeUnit

__all__ = [
    # Units
    "TimeUnit",
    # Timestamps
    "TimestampLike",
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
    # Unit arithmetic
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
    # Boundaries
    "day_of_week",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    # Differences
    "difference_in",
    "difference_in_days",
    "difference_in_hours",
    "difference_in_minutes",
    "difference_in_seconds",
    # Comparisons
    "is_same_day",
    "is_same_week",
    "is_same_month",
    "is_same_year",
]
