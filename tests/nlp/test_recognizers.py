"""Tests for the individual phrase recognizers.

Recognizers receive already-normalized (stripped, lowercased) text.
Reference: Wednesday, July 9, 2025, 3:00 PM.
"""

from datetime import datetime, timedelta

import pytest

from chronofns.nlp.models import RecognizerKind
from chronofns.nlp.recognizers import (
    WEEKDAYS,
    recognize_period_boundary,
    recognize_relative_keyword,
    recognize_relative_offset,
    recognize_time_of_day,
    recognize_weekday,
    resolve_weekday,
)


# ---------------------------------------------------------------------------
# Relative Keywords
# ---------------------------------------------------------------------------


class TestRelativeKeyword:
    """Test today/now/tomorrow/yesterday."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("today", datetime(2025, 7, 9)),
            ("now", datetime(2025, 7, 9)),
            ("tomorrow", datetime(2025, 7, 10)),
            ("yesterday", datetime(2025, 7, 8)),
        ],
    )
    def test_keywords_resolve_to_midnight(self, reference, text, expected):
        result = recognize_relative_keyword(text, reference)

        assert result.instant == expected
        assert result.confidence == 0.95
        assert result.kind is RecognizerKind.KEYWORD

    def test_trailing_text_goes_to_remaining(self, reference):
        """Unrelated trailing words are reported, not rejected."""
        result = recognize_relative_keyword("tomorrow extra text", reference)

        assert result.instant == datetime(2025, 7, 10)
        assert result.matched == "tomorrow"
        assert result.remaining == "extra text"

    def test_keyword_must_be_whole_word(self, reference):
        """'nowhere' does not start with the keyword 'now'."""
        result = recognize_relative_keyword("nowhere", reference)

        assert result.instant is None
        assert result.remaining == "nowhere"

    def test_keyword_must_lead(self, reference):
        assert recognize_relative_keyword("see you tomorrow", reference).instant is None


# ---------------------------------------------------------------------------
# Relative Offsets
# ---------------------------------------------------------------------------


class TestRelativeOffset:
    """Test 'in N units', 'N units from now', 'N units ago'."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("in 2 hours", datetime(2025, 7, 9, 17, 0)),
            ("5 minutes from now", datetime(2025, 7, 9, 15, 5)),
            ("1 year ahead", datetime(2026, 7, 9, 15, 0)),
            ("3 days", datetime(2025, 7, 12, 15, 0)),
            ("2 weeks ago", datetime(2025, 6, 25, 15, 0)),
            ("1 month ago", datetime(2025, 6, 9, 15, 0)),
            ("30 seconds ago", datetime(2025, 7, 9, 14, 59, 30)),
        ],
    )
    def test_offsets_keep_time_of_day(self, reference, text, expected):
        result = recognize_relative_offset(text, reference)

        assert result.instant == expected
        assert result.confidence == 0.90
        assert result.kind is RecognizerKind.OFFSET
        assert result.matched == text
        assert result.remaining == ""

    def test_zero_amount_is_reference(self, reference):
        assert recognize_relative_offset("0 days ago", reference).instant == reference

    def test_trailing_text_rejected(self, reference):
        """Offsets are anchored at both ends."""
        assert recognize_relative_offset("in 2 hours please", reference).instant is None

    def test_unknown_unit_rejected(self, reference):
        assert recognize_relative_offset("in 2 fortnights", reference).instant is None

    def test_negative_amount_rejected(self, reference):
        assert recognize_relative_offset("in -2 days", reference).instant is None


# ---------------------------------------------------------------------------
# Weekdays
# ---------------------------------------------------------------------------


class TestWeekday:
    """Test next/last/this weekday references from a Wednesday."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("next monday", datetime(2025, 7, 14)),
            ("last friday", datetime(2025, 7, 4)),
            ("this saturday", datetime(2025, 7, 12)),
            ("next wednesday", datetime(2025, 7, 16)),
            ("last wednesday", datetime(2025, 7, 2)),
            ("this wednesday", datetime(2025, 7, 9)),
            ("this monday", datetime(2025, 7, 14)),
            ("next sunday", datetime(2025, 7, 13)),
        ],
    )
    def test_weekday_resolution(self, reference, text, expected):
        result = recognize_weekday(text, reference)

        assert result.instant == expected
        assert result.confidence == 0.85
        assert result.kind is RecognizerKind.WEEKDAY

    @pytest.mark.parametrize("target_day", range(7))
    def test_next_is_within_one_week(self, reference, target_day):
        """'next' is 1-7 days ahead and 'last' 1-7 days back."""
        midnight = datetime(2025, 7, 9)
        ahead = resolve_weekday("next", target_day, reference) - midnight
        back = midnight - resolve_weekday("last", target_day, reference)

        assert timedelta(days=1) <= ahead <= timedelta(days=7)
        assert timedelta(days=1) <= back <= timedelta(days=7)

    def test_weekday_table_starts_sunday(self):
        assert WEEKDAYS[0] == "sunday"
        assert WEEKDAYS[6] == "saturday"

    def test_unknown_modifier(self, reference):
        with pytest.raises(ValueError):
            resolve_weekday("someday", 1, reference)

    def test_bare_weekday_not_matched(self, reference):
        assert recognize_weekday("monday", reference).instant is None


# ---------------------------------------------------------------------------
# Period Boundaries and Time of Day
# ---------------------------------------------------------------------------


class TestPeriodBoundary:
    """Test start/end of month and week."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("start of the month", datetime(2025, 7, 1)),
            ("beginning of month", datetime(2025, 7, 1)),
            ("end of month", datetime(2025, 7, 31, 23, 59, 59, 999000)),
            ("start of week", datetime(2025, 7, 6)),
            ("end of the week", datetime(2025, 7, 12, 23, 59, 59, 999000)),
        ],
    )
    def test_boundaries(self, reference, text, expected):
        result = recognize_period_boundary(text, reference)

        assert result.instant == expected
        assert result.confidence == 0.80
        assert result.kind is RecognizerKind.PERIOD

    def test_week_start_day(self, reference):
        """The week boundary honors the configured first day."""
        result = recognize_period_boundary("beginning of the week", reference, week_start_day=1)
        assert result.instant == datetime(2025, 7, 7)

    def test_leap_february_end(self):
        result = recognize_period_boundary("end of the month", datetime(2024, 2, 10))
        assert result.instant == datetime(2024, 2, 29, 23, 59, 59, 999000)


class TestTimeOfDay:
    """Test noon and midnight."""

    def test_noon(self, reference):
        result = recognize_time_of_day("noon", reference)

        assert result.instant == datetime(2025, 7, 9, 12, 0)
        assert result.confidence == 0.75
        assert result.kind is RecognizerKind.TIME_OF_DAY

    def test_midnight_is_start_of_reference_day(self, reference):
        assert recognize_time_of_day("midnight", reference).instant == datetime(2025, 7, 9)

    def test_other_times_not_matched(self, reference):
        assert recognize_time_of_day("noonish", reference).instant is None
