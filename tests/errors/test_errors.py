"""Tests for the error hierarchy and user-facing messages."""

import pytest

from humandate.errors import (
    ConflictingModifiersError,
    DateOutOfRangeError,
    HumanDateError,
    InvalidConfigError,
    InvalidDateComponentError,
    InvalidNumberError,
    ParseError,
    UnrecognizedFormatError,
    handle_error,
    is_recoverable,
)
from humandate.errors.user_messages import (
    ERROR_MESSAGES,
    RECOVERY_SUGGESTIONS,
    format_error_for_cli,
    get_recovery_suggestion,
    get_user_message,
)


PARSE_ERRORS = [
    UnrecognizedFormatError("banana"),
    InvalidNumberError("x"),
    InvalidDateComponentError("day", 30),
    ConflictingModifiersError("in 3 days ago"),
    DateOutOfRangeError("in 9000 years"),
]


class TestErrorHierarchy:
    """Tests for codes, details and equality."""

    @pytest.mark.parametrize("error", PARSE_ERRORS, ids=lambda e: e.code)
    def test_parse_errors_share_base(self, error):
        assert isinstance(error, ParseError)
        assert isinstance(error, HumanDateError)
        assert is_recoverable(error)

    @pytest.mark.parametrize("error", PARSE_ERRORS, ids=lambda e: e.code)
    def test_every_code_has_message_and_suggestion(self, error):
        assert error.code in ERROR_MESSAGES
        assert error.code in RECOVERY_SUGGESTIONS

    def test_details_carry_context(self):
        assert UnrecognizedFormatError("banana").details == {"text": "banana"}
        assert InvalidNumberError("x").details == {"token": "x"}
        assert InvalidDateComponentError("month", 13).details == {"field": "month", "value": 13}

    def test_equality_by_type_and_details(self):
        assert UnrecognizedFormatError("banana") == UnrecognizedFormatError("banana")
        assert UnrecognizedFormatError("banana") != UnrecognizedFormatError("apple")
        assert UnrecognizedFormatError("x") != InvalidNumberError("x")

    def test_equal_errors_hash_equal(self):
        first = HumanDateError("a", details={"text": "same"})
        second = HumanDateError("b", details={"text": "same"})

        assert first == second
        assert hash(first) == hash(second)
        assert len({UnrecognizedFormatError("banana"), UnrecognizedFormatError("banana")}) == 1

    def test_config_error_with_list_details_is_hashable(self):
        error = InvalidConfigError(details={"fields": ["bare_weekday"]})

        assert hash(error) == hash(InvalidConfigError(details={"fields": ["bare_weekday"]}))

    def test_to_dict(self):
        payload = InvalidDateComponentError("day", 32).to_dict()

        assert payload["code"] == "INVALID_DATE_COMPONENT"
        assert payload["details"] == {"field": "day", "value": 32}
        assert payload["user_message"] == "The day value 32 is out of range."
        assert payload["recoverable"] is True

    def test_str_is_technical_message(self):
        assert str(InvalidNumberError("x")) == "Invalid number in duration: 'x'"

    def test_config_error_not_recoverable(self):
        assert not is_recoverable(InvalidConfigError())

    def test_foreign_exception_not_recoverable(self):
        assert not is_recoverable(RuntimeError("boom"))


class TestUserMessages:
    """Tests for message templates and formatting helpers."""

    def test_message_filled_from_details(self):
        assert get_user_message(UnrecognizedFormatError("banana")) == (
            "'banana' is not a date or time phrase we understand."
        )
        assert get_user_message(InvalidNumberError("three")) == "'three' is not a number we can count with."

    def test_lookup_by_code_string(self):
        assert get_recovery_suggestion("INVALID_NUMBER") == RECOVERY_SUGGESTIONS["INVALID_NUMBER"]

    def test_unknown_error_falls_back(self):
        assert get_user_message(KeyError("x")) == ERROR_MESSAGES["UNKNOWN_ERROR"]

    def test_template_without_details(self):
        """A template whose placeholders are missing is returned unfilled."""
        error = HumanDateError()
        error.code = "UNRECOGNIZED_FORMAT"

        assert get_user_message(error) == ERROR_MESSAGES["UNRECOGNIZED_FORMAT"]

    def test_user_message_override(self):
        error = ParseError(user_message="Custom text")

        assert error.user_message == "Custom text"

    def test_handle_error(self):
        text = handle_error(ConflictingModifiersError("3 days"))

        assert text.startswith("'3 days' must say either")
        assert "Suggestion:" in text

    def test_cli_format_lists_details(self):
        text = format_error_for_cli(InvalidDateComponentError("hour", 24))

        assert text.startswith("Error [INVALID_DATE_COMPONENT]: The hour value 24 is out of range.")
        assert "  field: hour" in text
        assert "  value: 24" in text
