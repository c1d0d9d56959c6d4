"""Temporal arithmetic that turns a resolved shape into a concrete datetime.

Two kinds of arithmetic are kept apart:

- Calendar units (years, months) move the date fields with
  ``dateutil.relativedelta``, clamping the day to the end of a shorter month
  (Jan 31 + 1 month is Feb 28 or 29). Years are applied before months.
- Fixed units (weeks, days, hours, minutes, seconds) are exact elapsed time
  and are added as a single ``timedelta`` after the calendar step.

Weekday phrases only ever use day-count arithmetic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from humandate.configuration.settings import (
    DEFAULT_SETTINGS,
    ParserSettings,
    TimeOfDayPolicy,
    WeekdayPolicy,
)
from humandate.errors import DateOutOfRangeError
from humandate.parsing.clock import at_midnight, at_time
from humandate.parsing.models import (
    AbsoluteDateTime,
    ClockTime,
    DayKeyword,
    Duration,
    DurationTerm,
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

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Arithmetic Helpers
# ---------------------------------------------------------------------------


def apply_duration(moment: datetime, duration: Duration) -> datetime:
    """Apply a signed duration: years, then months, then the fixed units.

    Raises:
        OverflowError: the result leaves the supported year range
    """
    direction = duration.sign.value
    years, months = duration.calendar_terms
    try:
        if years:
            moment = moment + relativedelta(years=direction * years)
        if months:
            moment = moment + relativedelta(months=direction * months)
        return moment + direction * duration.fixed_delta
    except ValueError as exc:
        # relativedelta reports year overflow as ValueError
        raise OverflowError(str(exc)) from exc


def shift_weekday(reference: datetime, qualifier: Qualifier, weekday: Weekday) -> datetime:
    """Move ``reference`` to ``weekday`` according to ``qualifier``.

    LAST and NEXT always move 1-7 days. THIS stays inside the Monday-started
    week containing ``reference``. NONE is the nearest occurrence on or after
    ``reference`` (0-6 days).
    """
    current = reference.weekday()
    target = weekday.value
    if qualifier is Qualifier.LAST:
        return reference - timedelta(days=(current - target) % 7 or 7)
    if qualifier is Qualifier.NEXT:
        return reference + timedelta(days=(target - current) % 7 or 7)
    if qualifier is Qualifier.THIS:
        return reference + timedelta(days=target - current)
    return reference + timedelta(days=(target - current) % 7)


def _time_or_default(moment: datetime, time: Optional[TimeOfDay], policy: TimeOfDayPolicy) -> datetime:
    if time is not None:
        return at_time(moment, time)
    if policy is TimeOfDayPolicy.MIDNIGHT:
        return at_midnight(moment)
    return moment


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TemporalResolver:
    """Compute the datetime a resolved shape denotes, relative to a reference.

    The resolver keeps only its (immutable) settings and can be shared freely.
    """

    def __init__(self, settings: ParserSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def resolve(self, shape: ResolvedShape, reference: datetime, original: str = "") -> datetime:
        """Resolve ``shape`` against ``reference``.

        Args:
            shape: Shape produced by a matcher
            reference: Naive reference instant
            original: Caller's raw input, for error reporting

        Returns:
            Naive datetime

        Raises:
            DateOutOfRangeError: the arithmetic left years 1-9999
        """
        try:
            return self._resolve(shape, reference)
        except OverflowError as exc:
            logger.debug("Resolving %r overflowed: %s", original, exc)
            raise DateOutOfRangeError(original) from exc

    def _resolve(self, shape: ResolvedShape, reference: datetime) -> datetime:
        if isinstance(shape, AbsoluteDateTime):
            time = shape.time or TimeOfDay(0, 0, 0)
            return datetime(shape.year, shape.month, shape.day, time.hour, time.minute, time.second)

        if isinstance(shape, KeywordDay):
            return self._resolve_keyword(shape, reference)

        if isinstance(shape, WeekdayReference):
            qualifier = shape.qualifier
            if qualifier is Qualifier.NONE and self.settings.bare_weekday is WeekdayPolicy.THIS_WEEK:
                qualifier = Qualifier.THIS
            day = shift_weekday(reference, qualifier, shape.weekday)
            return _time_or_default(day, shape.time, self.settings.weekday_default_time)

        if isinstance(shape, WeekdayInWeek):
            week = reference + timedelta(weeks=shape.qualifier.step)
            day = shift_weekday(week, Qualifier.THIS, shape.weekday)
            return _time_or_default(day, shape.time, self.settings.weekday_default_time)

        if isinstance(shape, RelativePeriod):
            return self._resolve_period(shape, reference)

        if isinstance(shape, ClockTime):
            return at_time(reference, shape.time)

        if isinstance(shape, RelativeOffset):
            return self._resolve_offset(shape, reference)

        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def _resolve_keyword(self, shape: KeywordDay, reference: datetime) -> datetime:
        if shape.keyword is DayKeyword.NOW:
            return reference
        day = reference + timedelta(days=shape.keyword.day_offset)
        return _time_or_default(day, shape.time, self.settings.keyword_default_time)

    def _resolve_period(self, shape: RelativePeriod, reference: datetime) -> datetime:
        step = shape.qualifier.step
        if step:
            sign = Sign.FUTURE if step > 0 else Sign.PAST
            moved = apply_duration(reference, Duration.from_terms((DurationTerm(1, shape.unit),), sign))
        else:
            moved = reference
        if shape.time is not None:
            return at_time(moved, shape.time)
        return moved

    def _resolve_offset(self, shape: RelativeOffset, reference: datetime) -> datetime:
        # innermost anchor first, then each duration outward
        durations = []
        anchor: Optional[ResolvedShape] = shape
        while isinstance(anchor, RelativeOffset):
            durations.append(anchor.duration)
            anchor = anchor.anchor
        moment = reference if anchor is None else self._resolve(anchor, reference)
        for duration in reversed(durations):
            moment = apply_duration(moment, duration)
        return moment
