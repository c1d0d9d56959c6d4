"""User-friendly error messages for humandate.

This module provides human-readable error messages and recovery suggestions
for all error types, so callers never have to show raw exception text.

Messages are templates filled from the error's ``details`` mapping, which is
how the offending token, field or original phrase reaches the user.
"""

from __future__ import annotations

from typing import Any, Mapping


# =============================================================================
# Error Message Catalog
# =============================================================================

ERROR_MESSAGES: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "We couldn't turn that phrase into a date.",
    "UNRECOGNIZED_FORMAT": "'{text}' is not a date or time phrase we understand.",
    "INVALID_NUMBER": "'{token}' is not a number we can count with.",
    "INVALID_DATE_COMPONENT": "The {field} value {value} is out of range.",
    "CONFLICTING_MODIFIERS": "'{text}' must say either 'in ...' or '... ago', exactly once.",
    "DATE_OUT_OF_RANGE": "'{text}' lands outside the supported calendar (years 1 to 9999).",
    # Configuration errors
    "CONFIGURATION_ERROR": "There's a configuration issue.",
    "INVALID_CONFIG": "The parser settings are invalid.",
    # Generic
    "HUMANDATE_ERROR": "An unexpected error occurred.",
    "UNKNOWN_ERROR": "Something went wrong. Please try again.",
}


# =============================================================================
# Recovery Suggestions
# =============================================================================

RECOVERY_SUGGESTIONS: dict[str, str] = {
    # Parse errors
    "PARSE_ERROR": "Try a simpler phrase such as 'tomorrow 09:00' or 'in 2 hours'.",
    "UNRECOGNIZED_FORMAT": (
        "Use phrases like 'now', 'yesterday 18:30', 'last friday at 19:45', "
        "'in 3 days', '10 hours ago' or 'YYYY-MM-DD HH:MM:SS'."
    ),
    "INVALID_NUMBER": "Write quantities as digits ('3 days') or as 'a'/'an' ('an hour').",
    "INVALID_DATE_COMPONENT": (
        "Months run 1-12, days must exist in that month, hours 0-23, "
        "minutes and seconds 0-59."
    ),
    "CONFLICTING_MODIFIERS": "Write 'in 3 days' for the future or '3 days ago' for the past.",
    "DATE_OUT_OF_RANGE": "Use a smaller offset.",
    # Configuration errors
    "CONFIGURATION_ERROR": "Check the options passed to the parser.",
    "INVALID_CONFIG": "Use one of the documented policy values for each setting.",
    # Generic
    "HUMANDATE_ERROR": "If this persists, please report the issue.",
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


def _fill(template: str, details: Mapping[str, Any]) -> str:
    try:
        return template.format_map(details)
    except (KeyError, IndexError, ValueError):
        return template


def get_user_message(error: Any) -> str:
    """Get user-friendly message for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        User-friendly error message
    """
    code = _error_code(error)
    template = ERROR_MESSAGES.get(code, ERROR_MESSAGES["UNKNOWN_ERROR"])
    return _fill(template, getattr(error, "details", None) or {})


def get_recovery_suggestion(error: Any) -> str:
    """Get recovery suggestion for an error.

    Args:
        error: The error (can be Exception or error code string)

    Returns:
        Recovery suggestion
    """
    code = _error_code(error)
    return RECOVERY_SUGGESTIONS.get(code, RECOVERY_SUGGESTIONS["UNKNOWN_ERROR"])


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
    """Format error for CLI output.

    Args:
        error: The error to format

    Returns:
        CLI-formatted error message
    """
    message = get_user_message(error)
    suggestion = get_recovery_suggestion(error)
    code = getattr(error, "code", "ERROR")

    lines = [
        f"Error [{code}]: {message}",
        "",
        f"Suggestion: {suggestion}",
    ]

    if getattr(error, "details", None):
        lines.append("")
        lines.append("Details:")
        for key, value in error.details.items():
            lines.append(f"  {key}: {value}")

    return "\n".join(lines)
