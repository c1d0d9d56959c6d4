"""End-to-end tests for the public parse() entry point."""

from datetime import datetime, timedelta, timezone

import pytest

from humandate import (
    ConflictingModifiersError,
    DateOutOfRangeError,
    HumanDateParser,
    InvalidDateComponentError,
    InvalidNumberError,
    ParserSettings,
    ParseError,
    UnrecognizedFormatError,
    WeekdayPolicy,
    parse,
)
from humandate.parsing.models import KeywordDay, WeekdayReference


# ---------------------------------------------------------------------------
# Properties Over Many References
# ---------------------------------------------------------------------------


class TestReferenceProperties:
    """Invariants that must hold for any reference instant."""

    def test_now_is_reference(self, reference_instants):
        for reference in reference_instants:
            assert parse("now", reference) == reference

    def test_yesterday_and_tomorrow_shift_one_day(self, reference_instants):
        for reference in reference_instants:
            assert parse("yesterday", reference) == reference - timedelta(days=1)
            assert parse("tomorrow", reference) == reference + timedelta(days=1)

    def test_today_keeps_time_of_day(self, reference_instants):
        for reference in reference_instants:
            assert parse("Today", reference) == reference

    def test_fixed_offsets_invert(self, reference_instants):
        for reference in reference_instants:
            forward = parse("in 3 days", reference)
            assert parse("3 days ago", forward) == reference

    def test_compound_fixed_offsets_invert(self, reference_instants):
        for reference in reference_instants:
            forward = parse("in 2 weeks, 3 hours and 4 seconds", reference)
            assert parse("2 weeks, 3 hours and 4 seconds ago", forward) == reference

    def test_absolute_round_trip(self, reference_instants):
        for reference in reference_instants:
            first = parse("2022-11-07 13:25:30", reference)
            again = parse(first.strftime("%Y-%m-%d %H:%M:%S"), reference)
            assert first == again == datetime(2022, 11, 7, 13, 25, 30)

    def test_unrecognized_for_any_reference(self, reference_instants):
        for reference in reference_instants:
            with pytest.raises(UnrecognizedFormatError) as exc_info:
                parse("banana", reference)
            assert exc_info.value == UnrecognizedFormatError("banana")


# ---------------------------------------------------------------------------
# Documented Examples
# ---------------------------------------------------------------------------


class TestDocumentedExamples:
    """Concrete phrases with known answers."""

    def test_this_last_next_friday(self, wednesday_midnight):
        assert parse("this Friday", wednesday_midnight) == datetime(2024, 5, 10)
        assert parse("last Friday", wednesday_midnight) == datetime(2024, 5, 3)
        assert parse("next Friday", wednesday_midnight) == datetime(2024, 5, 10)

    def test_compound_ago(self, wednesday_noon):
        assert parse("10 hours and 5 minutes ago", wednesday_noon) == datetime(2024, 5, 8, 1, 55)

    def test_last_friday_at_time(self, wednesday_noon):
        assert parse("Last Friday at 19:45", wednesday_noon) == datetime(2024, 5, 3, 19, 45)

    def test_time_then_weekday(self, wednesday_noon):
        assert parse("13:25, Next Tuesday", wednesday_noon) == datetime(2024, 5, 14, 13, 25)
        assert parse("15:20 Friday", wednesday_noon) == datetime(2024, 5, 10, 15, 20)

    def test_keyword_with_time(self, wednesday_noon):
        assert parse("Today 18:30", wednesday_noon) == datetime(2024, 5, 8, 18, 30)
        assert parse("Yesterday 18:30", wednesday_noon) == datetime(2024, 5, 7, 18, 30)
        assert parse("Overmorrow 18:30", wednesday_noon) == datetime(2024, 5, 10, 18, 30)

    def test_overmorrow_without_time(self, afternoon_reference):
        assert parse("Overmorrow", afternoon_reference) == datetime(2024, 1, 17, 14, 30, 45)

    def test_in_phrases(self, wednesday_noon):
        assert parse("In 3 days", wednesday_noon) == datetime(2024, 5, 11, 12, 0)
        assert parse("In 2 hours", wednesday_noon) == datetime(2024, 5, 8, 14, 0)
        assert parse("In 5 minutes and 30 seconds", wednesday_noon) == datetime(2024, 5, 8, 12, 5, 30)
        assert parse("In 7 months", wednesday_noon) == datetime(2024, 12, 8, 12, 0)

    def test_single_unit_phrases(self, wednesday_noon):
        assert parse("A year ago", wednesday_noon) == datetime(2023, 5, 8, 12, 0)
        assert parse("A month ago", wednesday_noon) == datetime(2024, 4, 8, 12, 0)
        assert parse("A week ago", wednesday_noon) == datetime(2024, 5, 1, 12, 0)
        assert parse("An hour ago", wednesday_noon) == datetime(2024, 5, 8, 11, 0)
        assert parse("A second ago", wednesday_noon) == datetime(2024, 5, 8, 11, 59, 59)

    def test_every_unit_ago(self, wednesday_noon):
        result = parse("1 year, 1 month, 1 week, 1 day, 1 hour, 1 minute and 1 second ago", wednesday_noon)

        assert result == datetime(2023, 3, 31, 10, 58, 59)

    def test_absolute_ignores_reference(self, wednesday_noon, afternoon_reference):
        assert parse("2022-11-07 13:25:30", wednesday_noon) == datetime(2022, 11, 7, 13, 25, 30)
        assert parse("2022-11-07 13:25", afternoon_reference) == datetime(2022, 11, 7, 13, 25)
        assert parse("2024-03-03", afternoon_reference) == datetime(2024, 3, 3)

    def test_day_month_names(self, wednesday_noon):
        assert parse("15 Feb 2017", wednesday_noon) == datetime(2017, 2, 15)
        assert parse("13 November", wednesday_noon) == datetime(2024, 11, 13)

    def test_week_phrases(self, wednesday_noon):
        assert parse("Next week", wednesday_noon) == datetime(2024, 5, 15, 12, 0)
        assert parse("Last week", wednesday_noon) == datetime(2024, 5, 1, 12, 0)
        assert parse("This week", wednesday_noon) == wednesday_noon
        assert parse("Next week Monday", wednesday_noon) == datetime(2024, 5, 13)
        assert parse("This week Friday", wednesday_noon) == datetime(2024, 5, 10)
        assert parse("Last week Tuesday", wednesday_noon) == datetime(2024, 4, 30)

    def test_bare_clock_time(self, wednesday_noon):
        assert parse("0:20", wednesday_noon) == datetime(2024, 5, 8, 0, 20)
        assert parse("15:55:25", wednesday_noon) == datetime(2024, 5, 8, 15, 55, 25)

    def test_ago_at_time(self, wednesday_noon):
        assert parse("7 days ago at 04:00", wednesday_noon) == datetime(2024, 5, 1, 4, 0)
        assert parse("12 hours ago at 04:00", wednesday_noon) == datetime(2024, 5, 7, 16, 0)

    def test_ago_at_phrase(self, wednesday_noon):
        assert parse("12 hours ago at today", wednesday_noon) == datetime(2024, 5, 8, 0, 0)
        assert parse("12 hours ago at 7 days ago", wednesday_noon) == datetime(2024, 5, 1, 0, 0)
        assert parse("7 days ago at 7 days ago", wednesday_noon) == datetime(2024, 4, 24, 12, 0)

    def test_ago_at_weekday_and_date(self, wednesday_noon):
        assert parse("2 hours ago at last friday 10:00", wednesday_noon) == datetime(2024, 5, 3, 8, 0)
        assert parse("1 month ago at 2024-03-31", wednesday_noon) == datetime(2024, 2, 29)

    def test_tolerates_case_space_and_punctuation(self, wednesday_noon):
        assert parse("  IN   3 DAYS!  ", wednesday_noon) == datetime(2024, 5, 11, 12, 0)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    """Structured failures from the entry point."""

    def test_invalid_day(self, wednesday_noon):
        with pytest.raises(InvalidDateComponentError) as exc_info:
            parse("2024-02-30 10:00:00", wednesday_noon)

        assert exc_info.value.field == "day"
        assert exc_info.value.value == 30

    def test_hour_24(self, wednesday_noon):
        with pytest.raises(InvalidDateComponentError) as exc_info:
            parse("2024-05-01 24:00", wednesday_noon)

        assert (exc_info.value.field, exc_info.value.value) == ("hour", 24)

    def test_invalid_number(self, wednesday_noon):
        with pytest.raises(InvalidNumberError) as exc_info:
            parse("in some days", wednesday_noon)

        assert exc_info.value.token == "some"

    def test_conflicting_modifiers(self, wednesday_noon):
        with pytest.raises(ConflictingModifiersError):
            parse("in 3 days ago", wednesday_noon)
        with pytest.raises(ConflictingModifiersError):
            parse("3 days", wednesday_noon)

    def test_unknown_unit_reports_original(self, wednesday_noon):
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            parse("In 3 Fortnights", wednesday_noon)

        assert exc_info.value.text == "In 3 Fortnights"

    def test_unit_without_quantity_is_unrecognized(self, wednesday_noon):
        for text in ("the week", "banana days"):
            with pytest.raises(UnrecognizedFormatError) as exc_info:
                parse(text, wednesday_noon)
            assert exc_info.value.text == text

    def test_ago_at_unknown_anchor(self, wednesday_noon):
        with pytest.raises(UnrecognizedFormatError):
            parse("3 days ago at banana", wednesday_noon)
        with pytest.raises(InvalidDateComponentError):
            parse("3 days ago at 25:00", wednesday_noon)

    def test_trailing_garbage_not_truncated(self, wednesday_noon):
        for text in ("tomorrow please", "2024-05-01 10:00 sharp", "last friday at 19:45 or so", "now!!! and then"):
            with pytest.raises(UnrecognizedFormatError):
                parse(text, wednesday_noon)

    def test_empty_input(self, wednesday_noon):
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            parse("   ", wednesday_noon)

        assert exc_info.value.text == "   "

    def test_out_of_range_result(self, wednesday_noon):
        with pytest.raises(DateOutOfRangeError):
            parse("in 9000 years", wednesday_noon)

    def test_huge_fixed_offset(self, wednesday_noon):
        with pytest.raises(DateOutOfRangeError):
            parse("in 99999999999999999999 days", wednesday_noon)

    def test_all_errors_are_parse_errors(self, wednesday_noon):
        for text in ("banana", "2024-13-01", "in x days", "3 days", "in 9000 years"):
            with pytest.raises(ParseError):
                parse(text, wednesday_noon)

    def test_aware_reference_rejected(self):
        with pytest.raises(ValueError):
            parse("now", datetime(2024, 5, 8, tzinfo=timezone.utc))

    def test_non_string_rejected(self, wednesday_noon):
        with pytest.raises(TypeError):
            parse(None, wednesday_noon)


# ---------------------------------------------------------------------------
# Parser Object
# ---------------------------------------------------------------------------


class TestHumanDateParser:
    """Tests for the reusable parser and its settings."""

    def test_recognize_returns_shape(self, parser, wednesday_noon):
        assert isinstance(parser.recognize("tomorrow", wednesday_noon), KeywordDay)
        assert isinstance(parser.recognize("friday 10:00", wednesday_noon), WeekdayReference)

    def test_settings_change_bare_weekday(self, wednesday_noon):
        upcoming = HumanDateParser(ParserSettings(bare_weekday=WeekdayPolicy.UPCOMING))

        assert upcoming.parse("monday", wednesday_noon) == datetime(2024, 5, 13)
        assert parse("monday", wednesday_noon) == datetime(2024, 5, 6)

    def test_settings_through_function(self, wednesday_noon):
        settings = ParserSettings(bare_weekday="upcoming")

        assert parse("tuesday", wednesday_noon, settings) == datetime(2024, 5, 14)

    def test_custom_matcher_chain(self, wednesday_noon):
        """A parser limited to keyword days treats everything else as unknown."""
        from humandate.parsing.matchers import KeywordDayMatcher

        keywords_only = HumanDateParser(matchers=[KeywordDayMatcher()])

        assert keywords_only.parse("tomorrow", wednesday_noon) == datetime(2024, 5, 9, 12, 0)
        with pytest.raises(UnrecognizedFormatError):
            keywords_only.parse("in 3 days", wednesday_noon)

    def test_parser_is_stateless(self, parser, wednesday_noon, afternoon_reference):
        first = parser.parse("next friday", wednesday_noon)
        parser.parse("3 days ago", afternoon_reference)

        assert parser.parse("next friday", wednesday_noon) == first
