"""Centralized error definitions for chronofns.

Calendar errors are programmer errors (a bad unit string, an unparseable
timestamp literal). They are raised immediately and never suppressed. The
phrase resolver itself never raises for text input.

Usage:
    from chronofns.errors import ChronoError, InvalidUnitError, handle_error

    try:
        add_units(ts, 1, "fortnight")
    except ChronoError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from typing import Any

from chronofns.errors.user_messages import (
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class ChronoError(Exception):
    """Base exception for all chronofns errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message looked up by code
        recoverable: Whether the error is potentially recoverable
        details: Additional error details for debugging
    """

    code: str = "CHRONO_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = False

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Calendar Errors
# =============================================================================


class CalendarError(ChronoError):
    """Base error for calendar arithmetic and timestamp coercion."""

    code = "CALENDAR_ERROR"
    default_message = "Calendar operation failed"


class InvalidUnitError(CalendarError):
    """Unit addition/subtraction with an unrecognized unit."""

    code = "INVALID_UNIT"
    default_message = "Invalid time unit"

    def __init__(self, unit: Any) -> None:
        super().__init__(f"Unknown unit: {unit}", details={"unit": str(unit)})
        self.unit = unit


class UnknownUnitError(CalendarError):
    """Difference computation with an unrecognized unit."""

    code = "UNKNOWN_UNIT"
    default_message = "Unknown time unit"

    def __init__(self, unit: Any) -> None:
        super().__init__(f"Unknown unit: {unit}", details={"unit": str(unit)})
        self.unit = unit


class InvalidTimestampError(CalendarError):
    """A value could not be turned into a timestamp."""

    code = "INVALID_TIMESTAMP"
    default_message = "Invalid timestamp"

    def __init__(self, value: Any, *, reason: str | None = None) -> None:
        message = reason or f"Invalid date: {value}"
        super().__init__(message, details={"value": repr(value)})
        self.value = value


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ChronoError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = True


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    code = "MISSING_CONFIG"
    default_message = "Missing required configuration"


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable."""
    if isinstance(error, ChronoError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "ChronoError",
    # Calendar
    "CalendarError",
    "InvalidUnitError",
    "UnknownUnitError",
    "InvalidTimestampError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
    # Handlers
    "handle_error",
    "is_recoverable",
]
