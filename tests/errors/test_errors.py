"""Tests for the error hierarchy and user-facing messages."""

import pytest

from chronofns.core.calendar import add_units, difference_in
from chronofns.core.timestamps import to_timestamp
from chronofns.errors import (
    CalendarError,
    ChronoError,
    ConfigurationError,
    InvalidConfigError,
    InvalidTimestampError,
    InvalidUnitError,
    MissingConfigError,
    UnknownUnitError,
    handle_error,
    is_recoverable,
)
from chronofns.errors.user_messages import (
    ERROR_MESSAGES,
    RECOVERY_SUGGESTIONS,
    format_error_for_cli,
    get_recovery_suggestion,
    get_user_message,
)


class TestErrorHierarchy:
    """Test codes, messages and inheritance."""

    def test_invalid_unit(self):
        error = InvalidUnitError("fortnight")

        assert isinstance(error, CalendarError)
        assert isinstance(error, ChronoError)
        assert error.code == "INVALID_UNIT"
        assert str(error) == "Unknown unit: fortnight"
        assert error.unit == "fortnight"
        assert error.details == {"unit": "fortnight"}

    def test_unknown_unit(self):
        error = UnknownUnitError("unknown")

        assert error.code == "UNKNOWN_UNIT"
        assert error.message == "Unknown unit: unknown"

    def test_invalid_timestamp(self):
        error = InvalidTimestampError("invalid")

        assert error.code == "INVALID_TIMESTAMP"
        assert error.message == "Invalid date: invalid"
        assert error.details == {"value": "'invalid'"}

    def test_invalid_timestamp_reason(self):
        error = InvalidTimestampError([], reason="Invalid date type: list")
        assert error.message == "Invalid date type: list"

    def test_configuration_errors_are_recoverable(self):
        assert isinstance(InvalidConfigError(), ConfigurationError)
        assert is_recoverable(MissingConfigError())
        assert not is_recoverable(InvalidUnitError("x"))
        assert not is_recoverable(ValueError("x"))

    def test_default_message(self):
        assert str(InvalidConfigError()) == "Invalid configuration"

    def test_every_code_has_catalog_entries(self):
        for error_cls in (
            ChronoError,
            CalendarError,
            InvalidConfigError,
            MissingConfigError,
            ConfigurationError,
        ):
            assert error_cls.code in ERROR_MESSAGES
            assert error_cls.code in RECOVERY_SUGGESTIONS
        for code in ("INVALID_UNIT", "UNKNOWN_UNIT", "INVALID_TIMESTAMP"):
            assert code in ERROR_MESSAGES
            assert code in RECOVERY_SUGGESTIONS


class TestRaisedFromCalendar:
    """Calendar functions raise the coded errors."""

    def test_add_units(self, reference):
        with pytest.raises(InvalidUnitError) as exc_info:
            add_units(reference, 1, "fortnight")
        assert exc_info.value.unit == "fortnight"

    def test_difference_in(self, reference):
        with pytest.raises(UnknownUnitError):
            difference_in(reference, reference, "eon")

    def test_to_timestamp(self):
        with pytest.raises(CalendarError):
            to_timestamp("garbage")


class TestUserMessages:
    """Test message lookup and formatting."""

    def test_user_message_from_catalog(self):
        error = InvalidUnitError("fortnight")

        assert error.user_message == ERROR_MESSAGES["INVALID_UNIT"]
        assert error.recovery_suggestion == RECOVERY_SUGGESTIONS["INVALID_UNIT"]

    def test_base_error_uses_generic_message(self):
        error = ChronoError("boom")

        assert error.message == "boom"
        assert error.user_message == ERROR_MESSAGES["CHRONO_ERROR"]

    def test_lookup_by_code_string(self):
        assert get_user_message("MISSING_CONFIG") == ERROR_MESSAGES["MISSING_CONFIG"]

    def test_unknown_error_falls_back(self):
        assert get_user_message(RuntimeError("x")) == ERROR_MESSAGES["UNKNOWN_ERROR"]
        assert get_recovery_suggestion(RuntimeError("x")) == RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"]

    def test_handle_error(self):
        text = handle_error(UnknownUnitError("eon"))

        assert text.startswith(ERROR_MESSAGES["UNKNOWN_UNIT"])
        assert "\n\nSuggestion: " in text

    def test_format_error_for_cli(self):
        text = format_error_for_cli(InvalidUnitError("fortnight"))

        assert text.startswith("Error [INVALID_UNIT]: ")
        assert "  Unknown unit: fortnight" in text
        assert "Suggestion: " in text
        assert "  unit: fortnight" in text

    def test_to_dict(self):
        payload = InvalidTimestampError("nope").to_dict()

        assert payload["code"] == "INVALID_TIMESTAMP"
        assert payload["message"] == "Invalid date: nope"
        assert payload["user_message"] == ERROR_MESSAGES["INVALID_TIMESTAMP"]
        assert payload["recoverable"] is False
