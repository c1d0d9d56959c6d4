"""Centralized error definitions for humandate.

Every failure the parser can report is a subclass of :class:`ParseError`, so a
caller only needs one ``except`` clause to handle any bad phrase.

Usage:
    from humandate import parse
    from humandate.errors import ParseError, handle_error

    try:
        when = parse(text, reference_now)
    except ParseError as e:
        print(handle_error(e))
"""

from __future__ import annotations

from humandate.errors.user_messages import (
    format_error_for_cli,
    format_error_for_user,
    get_recovery_suggestion,
    get_user_message,
)


# =============================================================================
# Base Error
# =============================================================================


class HumanDateError(Exception):
    """Base exception for all humandate errors.

    Attributes:
        code: Error code for categorization
        user_message: User-friendly message (optional override)
        recoverable: Whether the error is potentially recoverable
        details: Additional error details for debugging and message templates
    """

    code: str = "HUMANDATE_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
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

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.details == other.details

    def __hash__(self) -> int:
        # equal details imply equal keys
        return hash((type(self), tuple(sorted(self.details))))


# =============================================================================
# Parse Errors
# =============================================================================


class ParseError(HumanDateError):
    """Base error for phrases that cannot be resolved to a date-time."""

    code = "PARSE_ERROR"
    default_message = "Could not parse date/time phrase"


class UnrecognizedFormatError(ParseError):
    """No grammar shape matched the whole phrase."""

    code = "UNRECOGNIZED_FORMAT"
    default_message = "Unrecognized date/time format"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Unrecognized date/time format: {text!r}",
            details={"text": text},
        )


class InvalidNumberError(ParseError):
    """A duration quantity is neither digits nor 'a'/'an'."""

    code = "INVALID_NUMBER"
    default_message = "Invalid number"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Invalid number in duration: {token!r}",
            details={"token": token},
        )


class InvalidDateComponentError(ParseError):
    """An explicit date or time field is outside its valid range."""

    code = "INVALID_DATE_COMPONENT"
    default_message = "Invalid date component"

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field}: {value}",
            details={"field": field, "value": value},
        )


class ConflictingModifiersError(ParseError):
    """A relative offset has both 'in' and 'ago', or neither."""

    code = "CONFLICTING_MODIFIERS"
    default_message = "Conflicting or missing direction modifiers"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Expected exactly one of 'in ...' or '... ago': {text!r}",
            details={"text": text},
        )


class DateOutOfRangeError(ParseError):
    """The resolved date-time falls outside years 1 to 9999."""

    code = "DATE_OUT_OF_RANGE"
    default_message = "Resolved date is out of range"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(
            f"Resolved date is out of range: {text!r}",
            details={"text": text},
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(HumanDateError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"


class InvalidConfigError(ConfigurationError):
    """Parser settings failed validation."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"
    recoverable = False


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
    """Check if an error is potentially recoverable.

    Args:
        error: The exception to check

    Returns:
        True if the error is recoverable
    """
    if isinstance(error, HumanDateError):
        return error.recoverable
    return False


__all__ = [
    "HumanDateError",
    "ParseError",
    "UnrecognizedFormatError",
    "InvalidNumberError",
    "InvalidDateComponentError",
    "ConflictingModifiersError",
    "DateOutOfRangeError",
    "ConfigurationError",
    "InvalidConfigError",
    "handle_error",
    "is_recoverable",
    "format_error_for_cli",
    "format_error_for_user",
    "get_recovery_suggestion",
    "get_user_message",
]
