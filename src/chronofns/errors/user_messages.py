"""User-friendly error messages for chronofns.

Maps error codes to short human-readable messages and recovery suggestions,
so the CLI never prints a raw traceback for a bad unit or timestamp.
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Calendar errors
    "CALENDAR_ERROR": "The date calculation couldn't be completed.",
    "INVALID_UNIT": "That time unit isn't supported for adding or subtracting.",
    "UNKNOWN_UNIT": "That time unit isn't supported for differences.",
    "INVALID_TIMESTAMP": "That value couldn't be read as a date.",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The configuration is invalid. Check settings.",
    "MISSING_CONFIG": "The configuration file wasn't found.",
    # Generic
    "CHRONO_ERROR": "An unexpected error occurred.",
    "UNKNOWN_ERROR": "Something went wrong.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Calendar errors
    "CALENDAR_ERROR": "Check the date and unit you passed.",
    "INVALID_UNIT": "Use one of: millisecond, second, minute, hour, day, week, month, year.",
    "UNKNOWN_UNIT": "Use one of: millisecond, second, minute, hour, day, week, month, year.",
    "INVALID_TIMESTAMP": "Use an ISO date like 'YYYY-MM-DD' or 'YYYY-MM-DDTHH:MM:SS'.",
    # Configuration errors
    "CONFIGURATION_ERROR": "Check the settings file and CHRONOFNS_* environment variables.",
    "INVALID_CONFIG": "week_start_day must be 0-6 and log_level a logging level name.",
    "MISSING_CONFIG": "Pass an existing settings file or omit --config to use defaults.",
    # Generic
    "CHRONO_ERROR": "If this persists, please report the issue.",
    "UNKNOWN_ERROR": "Report the issue if it continues.",
}


# =============================================================================
# Helper Functions
# =============================================================================


def _error_code(error: Any) -> str:
    if hasattr(error, "code"):
        return error.code
    if isinstance(error, str):
        return error
    return type(error).__name__.upper()


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    return ERROR_MESSAGES.get(_error_code(error), ERROR_MESSAGES["UNKNOWN_ERROR"])


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error."""
    return RECOVERY_SUGGESTIONS.get(
        _error_code(error), RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"]
    )


def format_error_for_user(error: Any) -> str:
    """Format a complete user-friendly error message.

    Args:
        error: The error to format

    Returns:
        Complete error message with recovery suggestion
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)

    return f"{message}\n\nSuggestion: {suggestion}"


def format_error_for_cli(error: Any) -> str:
    """Format error for CLI output, including the technical message and details."""
    code = getattr(error, "code", "ERROR")
    lines = [
        f"Error [{code}]: {get_user_message(error)}",
    ]
    technical = getattr(error, "message", None)
    if technical:
        lines.append(f"  {technical}")
    lines.append("")
    lines.append(f"Suggestion: {get_recovery_suggestion(error)}")

    details = getattr(error, "details", None)
    if details:
        lines.append("")
        lines.append("Details:")
        for key, value in details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)


__all__ = [
    "ERROR_MESSAGES",
    "RECOVERY_SUGGESTIONS",
    "get_user_message",
    "get_recovery_suggestion",
    "format_error_for_user",
    "format_error_for_cli",
]
