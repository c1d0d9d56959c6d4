"""Grammar matchers for human date/time phrases.

Each matcher recognizes one grammatical shape and nothing else. The engine
tries them in :data:`DEFAULT_MATCHERS` order; the first one to return a shape
wins. A matcher:

- returns ``None`` when the phrase is not its shape (the next matcher runs),
- returns a resolved shape when the whole phrase matches,
- raises a :class:`~humandate.errors.ParseError` when the phrase is clearly
  its shape but malformed ("2024-02-30", "in x days"), ending the call.

Matchers hold no state, so the module-level instances are shared by every
parser.
"""

from __future__ import annotations

import calendar
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime
from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from humandate.configuration.settings import ParserSettings
from humandate.errors import InvalidDateComponentError, UnrecognizedFormatError
from humandate.parsing.clock import BARE_TIME_PATTERN, split_time, to_time_of_day
from humandate.parsing.duration import UNIT_NAMES, looks_like_duration, parse_duration
from humandate.parsing.models import (
    AbsoluteDateTime,
    ClockTime,
    DayKeyword,
    KeywordDay,
    Qualifier,
    RelativeOffset,
    RelativePeriod,
    ResolvedShape,
    Weekday,
    WeekdayInWeek,
    WeekdayReference,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------

WEEKDAY_NAMES = MappingProxyType({
    "monday": Weekday.MONDAY,
    "mon": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "tue": Weekday.TUESDAY,
    "tues": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "wed": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "thu": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY,
    "thurs": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "fri": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sat": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "sun": Weekday.SUNDAY,
})

_ENGLISH_MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# calendar.month_name follows the process locale, so English names are spelled out
MONTH_NAMES = MappingProxyType({
    **{name: number for number, name in enumerate(_ENGLISH_MONTHS, start=1)},
    **{name[:3]: number for number, name in enumerate(_ENGLISH_MONTHS, start=1)},
    "sept": 9,
})

QUALIFIERS = MappingProxyType({
    "this": Qualifier.THIS,
    "last": Qualifier.LAST,
    "next": Qualifier.NEXT,
})

_WEEKDAY_ALT = "|".join(sorted(WEEKDAY_NAMES, key=len, reverse=True))
_MONTH_ALT = "|".join(sorted(MONTH_NAMES, key=len, reverse=True))
_QUALIFIER_ALT = "|".join(QUALIFIERS)
_UNIT_ALT = "|".join(sorted(UNIT_NAMES, key=len, reverse=True))


def _validate_date(year: int, month: int, day: int) -> None:
    """Range-check calendar fields in year, month, day order."""
    if not 1 <= year <= 9999:
        raise InvalidDateComponentError("year", year)
    if not 1 <= month <= 12:
        raise InvalidDateComponentError("month", month)
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        raise InvalidDateComponentError("day", day)


# ---------------------------------------------------------------------------
# Base Matcher
# ---------------------------------------------------------------------------


class ShapeMatcher(ABC):
    """Recognizer for one grammar shape."""

    name: str = "shape"

    @abstractmethod
    def match(
        self,
        text: str,
        reference: datetime,
        settings: ParserSettings,
        original: str,
    ) -> Optional[ResolvedShape]:
        """Recognize the whole normalized ``text`` or decline with ``None``.

        Args:
            text: Normalized phrase
            reference: Reference instant, for fields the phrase leaves out
            settings: Parser policies
            original: Caller's raw input, for error reporting

        Raises:
            ParseError: The phrase is this shape but malformed
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Matchers
# ---------------------------------------------------------------------------


class AbsoluteDateMatcher(ShapeMatcher):
    """``YYYY-MM-DD[ HH:MM[:SS]]`` and ``D <month> [YYYY]``."""

    name = "absolute"

    ISO_DATE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})$")
    DAY_MONTH = re.compile(
        rf"^(?P<day>\d{{1,2}})(?:st|nd|rd|th)?\s+(?P<month>{_MONTH_ALT})(?:\s+(?P<year>\d{{4}}))?$"
    )

    def match(self, text, reference, settings, original):
        head, time_match = split_time(text)

        iso = self.ISO_DATE.match(head)
        if iso:
            year, month, day = (int(iso.group(g)) for g in ("year", "month", "day"))
        else:
            named = self.DAY_MONTH.match(head)
            if not named:
                return None
            day = int(named.group("day"))
            month = MONTH_NAMES[named.group("month")]
            year = int(named.group("year")) if named.group("year") else reference.year

        _validate_date(year, month, day)
        return AbsoluteDateTime(year, month, day, to_time_of_day(time_match))


class KeywordDayMatcher(ShapeMatcher):
    """now, today, yesterday, tomorrow, overmorrow, each with optional time."""

    name = "keyword"

    KEYWORDS = MappingProxyType({keyword.value: keyword for keyword in DayKeyword})

    def match(self, text, reference, settings, original):
        head, time_match = split_time(text)
        keyword = self.KEYWORDS.get(head)
        if keyword is None:
            return None
        if keyword is DayKeyword.NOW:
            # "now" pins the reference instant; a clock time after it is ignored
            return KeywordDay(keyword)
        return KeywordDay(keyword, to_time_of_day(time_match))


class WeekdayMatcher(ShapeMatcher):
    """``[this|last|next] <weekday>`` and ``<this|last|next> week <weekday>``.

    The clock time may trail ("last friday at 19:45") or lead
    ("13:25, next tuesday").
    """

    name = "weekday"

    WEEKDAY = re.compile(rf"^(?:(?P<qualifier>{_QUALIFIER_ALT})\s+)?(?P<weekday>{_WEEKDAY_ALT})$")
    WEEK_WEEKDAY = re.compile(
        rf"^(?P<qualifier>{_QUALIFIER_ALT})\s+week\s+(?P<weekday>{_WEEKDAY_ALT})$"
    )

    def match(self, text, reference, settings, original):
        head, time_match = split_time(text)

        in_week = self.WEEK_WEEKDAY.match(head)
        if in_week:
            return WeekdayInWeek(
                QUALIFIERS[in_week.group("qualifier")],
                WEEKDAY_NAMES[in_week.group("weekday")],
                to_time_of_day(time_match),
            )

        plain = self.WEEKDAY.match(head)
        if not plain:
            return None
        qualifier = QUALIFIERS.get(plain.group("qualifier") or "", Qualifier.NONE)
        return WeekdayReference(
            qualifier,
            WEEKDAY_NAMES[plain.group("weekday")],
            to_time_of_day(time_match),
        )


class RelativePeriodMatcher(ShapeMatcher):
    """``<this|last|next> <unit>``: "next week", "last month", "this year"."""

    name = "period"

    PERIOD = re.compile(rf"^(?P<qualifier>{_QUALIFIER_ALT})\s+(?P<unit>{_UNIT_ALT})$")

    def match(self, text, reference, settings, original):
        head, time_match = split_time(text)
        period = self.PERIOD.match(head)
        if not period:
            return None
        return RelativePeriod(
            QUALIFIERS[period.group("qualifier")],
            UNIT_NAMES[period.group("unit")],
            to_time_of_day(time_match),
        )


class ClockTimeMatcher(ShapeMatcher):
    """A bare clock time on the reference date: "18:30", "at 7:05:10"."""

    name = "clock"

    def match(self, text, reference, settings, original):
        clock = BARE_TIME_PATTERN.match(text)
        if not clock:
            return None
        return ClockTime(to_time_of_day(clock))


class RelativeOffsetMatcher(ShapeMatcher):
    """Signed durations: "in 3 days", "10 hours and 5 minutes ago".

    An attached clock time ("in 3 days at 10:00") anchors the offset at that
    time on the reference date. After "ago at" any other phrase may follow
    ("12 hours ago at today", "7 days ago at 7 days ago"); it is recognized
    with ``anchor_matchers`` (the default chain when unset) and the offset is
    counted from it.
    """

    name = "offset"

    ANCHOR_SEPARATOR = " ago at "

    def __init__(self, anchor_matchers: Optional[Sequence[ShapeMatcher]] = None):
        self.anchor_matchers = anchor_matchers

    def match(self, text, reference, settings, original):
        if self.ANCHOR_SEPARATOR in text:
            return self._match_anchored(text, reference, settings, original)

        head, time_match = split_time(text)
        if time_match is None or not looks_like_duration(head):
            head, time_match = text, None
        if not looks_like_duration(head):
            return None
        duration = parse_duration(head, original)
        time = to_time_of_day(time_match)
        return RelativeOffset(duration, ClockTime(time) if time is not None else None)

    def _match_anchored(self, text, reference, settings, original):
        # "a ago at b ago at c": every segment but the last is a past duration
        *heads, tail = text.split(self.ANCHOR_SEPARATOR)
        durations = [parse_duration(f"{head} ago", original) for head in heads]

        anchor = None
        for matcher in self.anchor_matchers or DEFAULT_MATCHERS:
            anchor = matcher.match(tail, reference, settings, original)
            if anchor is not None:
                break
        if anchor is None:
            logger.debug("Anchor %r of %r is not a phrase", tail, text)
            raise UnrecognizedFormatError(original)

        for duration in reversed(durations):
            anchor = RelativeOffset(duration, anchor)
        return anchor


DEFAULT_MATCHERS: Tuple[ShapeMatcher, ...] = (
    AbsoluteDateMatcher(),
    KeywordDayMatcher(),
    WeekdayMatcher(),
    RelativePeriodMatcher(),
    ClockTimeMatcher(),
    RelativeOffsetMatcher(),
)
