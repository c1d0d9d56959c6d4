"""Data models for human date/time phrase parsing.

This module defines the vocabulary shared by the matchers and the resolver:
- Weekday, qualifier and duration-unit enums
- Signed, unit-bucketed durations
- Resolved shapes, one per grammar shape, produced by a matcher and consumed
  immediately by the resolver

Shapes are frozen and carry no reference to the input text. Only a relative
offset nests another shape, its anchor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Weekday(Enum):
    """Day of week, valued like ``datetime.weekday()`` (Monday is 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class Qualifier(Enum):
    """Word modifying a weekday or period reference."""

    THIS = "this"
    LAST = "last"
    NEXT = "next"
    NONE = "none"

    @property
    def step(self) -> int:
        """Signed number of periods the qualifier moves by."""
        return {"last": -1, "next": 1}.get(self.value, 0)


class DurationUnit(Enum):
    """Unit of a duration term, ordered from largest to smallest."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def is_calendar(self) -> bool:
        """True for units whose length depends on the calendar."""
        return self in (DurationUnit.YEAR, DurationUnit.MONTH)


class Sign(Enum):
    """Direction of a relative offset."""

    PAST = -1
    FUTURE = 1


class DayKeyword(Enum):
    """Keyword naming a day relative to the reference date."""

    NOW = "now"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    OVERMORROW = "overmorrow"

    @property
    def day_offset(self) -> int:
        return _KEYWORD_OFFSETS[self.value]


_KEYWORD_OFFSETS = MappingProxyType({
    "now": 0,
    "today": 0,
    "yesterday": -1,
    "tomorrow": 1,
    "overmorrow": 2,
})

# Exact length of each fixed unit
FIXED_UNIT_DELTAS: Mapping[DurationUnit, timedelta] = MappingProxyType({
    DurationUnit.WEEK: timedelta(weeks=1),
    DurationUnit.DAY: timedelta(days=1),
    DurationUnit.HOUR: timedelta(hours=1),
    DurationUnit.MINUTE: timedelta(minutes=1),
    DurationUnit.SECOND: timedelta(seconds=1),
})


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeOfDay:
    """Explicit clock time written in a phrase."""

    hour: int
    minute: int
    second: int = 0


@dataclass(frozen=True)
class DurationTerm:
    """One quantity+unit pair such as "3 days" or "an hour"."""

    quantity: int
    unit: DurationUnit


@dataclass(frozen=True)
class Duration:
    """Signed, multi-unit duration.

    Terms are bucketed by unit: "1 hour and 30 minutes and 1 hour" holds
    ``{HOUR: 2, MINUTE: 30}``. Units iterate largest first regardless of the
    order they were written in.
    """

    quantities: Mapping[DurationUnit, int]
    sign: Sign

    @classmethod
    def from_terms(cls, terms: Tuple[DurationTerm, ...], sign: Sign) -> "Duration":
        buckets: Dict[DurationUnit, int] = {}
        for term in terms:
            buckets[term.unit] = buckets.get(term.unit, 0) + term.quantity
        ordered = {unit: buckets[unit] for unit in DurationUnit if unit in buckets}
        return cls(quantities=MappingProxyType(ordered), sign=sign)

    def get(self, unit: DurationUnit) -> int:
        return self.quantities.get(unit, 0)

    @property
    def terms(self) -> Tuple[DurationTerm, ...]:
        return tuple(DurationTerm(qty, unit) for unit, qty in self.quantities.items())

    @property
    def calendar_terms(self) -> Tuple[int, int]:
        """Unsigned (years, months)."""
        return self.get(DurationUnit.YEAR), self.get(DurationUnit.MONTH)

    @property
    def fixed_delta(self) -> timedelta:
        """Unsigned exact length of the week/day/hour/minute/second terms."""
        total = timedelta()
        for unit, qty in self.quantities.items():
            if not unit.is_calendar:
                total += FIXED_UNIT_DELTAS[unit] * qty
        return total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return dict(self.quantities) == dict(other.quantities) and self.sign == other.sign

    def __hash__(self) -> int:
        return hash((tuple(self.quantities.items()), self.sign))


# ---------------------------------------------------------------------------
# Resolved Shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AbsoluteDateTime:
    """Fully specified calendar date, optionally with a clock time."""

    year: int
    month: int
    day: int
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class KeywordDay:
    """now/today/yesterday/tomorrow/overmorrow."""

    keyword: DayKeyword
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class WeekdayReference:
    """Weekday with an optional qualifier: "last friday at 19:45"."""

    qualifier: Qualifier
    weekday: Weekday
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class WeekdayInWeek:
    """Weekday inside a qualified week: "next week monday"."""

    qualifier: Qualifier
    weekday: Weekday
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class RelativePeriod:
    """One unit away from the reference: "next week", "last month"."""

    qualifier: Qualifier
    unit: DurationUnit
    time: Optional[TimeOfDay] = None


@dataclass(frozen=True)
class ClockTime:
    """Bare clock time on the reference date."""

    time: TimeOfDay


@dataclass(frozen=True)
class RelativeOffset:
    """Signed duration applied to an anchor, or to the reference when unanchored.

    The anchor is any other phrase: a clock time ("7 days ago at 04:00"), a
    keyword ("12 hours ago at today") or another offset ("7 days ago at 7 days
    ago").
    """

    duration: Duration
    anchor: Optional[ResolvedShape] = None


ResolvedShape = Union[
    AbsoluteDateTime,
    KeywordDay,
    WeekdayReference,
    WeekdayInWeek,
    RelativePeriod,
    ClockTime,
    RelativeOffset,
]
