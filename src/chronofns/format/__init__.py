"""Timestamp formatting helpers."""

from chronofns.format.formatter import (
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

__all__ = [
    "DateFormat",
    "format_date",
    "format_relative",
    "format_human",
    "format_time12",
    "format_time24",
    "format_display",
    "format_range",
    "format_duration",
]
