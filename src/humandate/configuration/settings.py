"""Typed parser policy settings.

Some phrases have two reasonable readings ("friday" may mean this week's
Friday or the next one to come). The parser resolves them through the
policies in :class:`ParserSettings`, a frozen Pydantic model that is safe to
share between threads and parser instances.

Settings are always passed in explicitly; nothing is read from disk or the
environment.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from humandate.errors import InvalidConfigError


class WeekdayPolicy(str, Enum):
    """How an unqualified weekday ("friday") is placed."""

    THIS_WEEK = "this_week"  # same as "this friday"
    UPCOMING = "upcoming"    # nearest friday on or after the reference date


class TimeOfDayPolicy(str, Enum):
    """Time-of-day used when a phrase names a day but no clock time."""

    MIDNIGHT = "midnight"
    REFERENCE = "reference"  # keep the reference instant's time-of-day


class ParserSettings(BaseModel):
    """Policies for ambiguous phrases."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bare_weekday: WeekdayPolicy = Field(
        WeekdayPolicy.THIS_WEEK,
        description="Placement of a weekday without this/last/next",
    )
    weekday_default_time: TimeOfDayPolicy = Field(
        TimeOfDayPolicy.MIDNIGHT,
        description="Time-of-day for weekday phrases without a clock time",
    )
    keyword_default_time: TimeOfDayPolicy = Field(
        TimeOfDayPolicy.REFERENCE,
        description="Time-of-day for today/yesterday/tomorrow/overmorrow without a clock time",
    )


DEFAULT_SETTINGS = ParserSettings()


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> ParserSettings:
    """Build settings from a mapping of overrides or raise if invalid."""

    if not overrides:
        return DEFAULT_SETTINGS
    try:
        return ParserSettings.model_validate(dict(overrides))
    except ValidationError as exc:
        raise InvalidConfigError(
            f"Invalid configuration: {exc}",
            details={"fields": sorted(str(err["loc"][0]) for err in exc.errors() if err["loc"])},
        ) from exc
