"""Phrase recognition and temporal resolution.

Pipeline: normalizer -> matcher chain (duration parser for offsets) ->
resolver. See :func:`humandate.parsing.engine.parse`.
"""

from humandate.parsing.duration import looks_like_duration, parse_duration
from humandate.parsing.engine import HumanDateParser, parse
from humandate.parsing.matchers import (
    DEFAULT_MATCHERS,
    AbsoluteDateMatcher,
    ClockTimeMatcher,
    KeywordDayMatcher,
    RelativeOffsetMatcher,
    RelativePeriodMatcher,
    ShapeMatcher,
    WeekdayMatcher,
)
from humandate.parsing.models import (
    AbsoluteDateTime,
    ClockTime,
    DayKeyword,
    Duration,
    DurationTerm,
    DurationUnit,
    KeywordDay,
    Qualifier,
    RelativeOffset,
    RelativePeriod,
    ResolvedShape,
    Sign,
    TimeOfDay,
    Weekday,
    WeekdayInWeek,
    WeekdayReference,
)
from humandate.parsing.normalizer import normalize
from humandate.parsing.resolver import TemporalResolver, apply_duration, shift_weekday

__all__ = [
    # Entry points
    "HumanDateParser",
    "parse",
    # Components
    "normalize",
    "parse_duration",
    "looks_like_duration",
    "TemporalResolver",
    "apply_duration",
    "shift_weekday",
    # Matchers
    "ShapeMatcher",
    "AbsoluteDateMatcher",
    "KeywordDayMatcher",
    "WeekdayMatcher",
    "RelativePeriodMatcher",
    "ClockTimeMatcher",
    "RelativeOffsetMatcher",
    "DEFAULT_MATCHERS",
    # Models
    "Weekday",
    "Qualifier",
    "DurationUnit",
    "Sign",
    "DayKeyword",
    "TimeOfDay",
    "DurationTerm",
    "Duration",
    "AbsoluteDateTime",
    "KeywordDay",
    "WeekdayReference",
    "WeekdayInWeek",
    "RelativePeriod",
    "ClockTime",
    "RelativeOffset",
    "ResolvedShape",
]
