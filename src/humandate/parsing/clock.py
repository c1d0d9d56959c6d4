"""Clock-time literals shared by the matchers.

A clock time is ``H:MM`` or ``H:MM:SS``. In a phrase it either trails the day
part ("today 18:30", "last friday at 19:45", "2022-11-07 13:25") or leads it
("13:25, next tuesday"). Splitting is purely syntactic; the fields are only
range-checked once a matcher has recognized the rest of the phrase, so that
"banana 25:00" stays an unrecognized phrase rather than a bad hour.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from humandate.errors import InvalidDateComponentError
from humandate.parsing.models import TimeOfDay

logger = logging.getLogger(__name__)

TIME_LITERAL = r"(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?"

_SEPARATOR = r"(?:\s*,\s*|\s+)"

BARE_TIME_PATTERN = re.compile(rf"^(?:at\s+)?{TIME_LITERAL}$")
TRAILING_TIME_PATTERN = re.compile(rf"^(?P<head>.+?){_SEPARATOR}(?:at\s+)?{TIME_LITERAL}$")
LEADING_TIME_PATTERN = re.compile(rf"^(?:at\s+)?{TIME_LITERAL}{_SEPARATOR}(?P<head>.+)$")

# Field limits checked in this order
_TIME_FIELDS = (("hour", 23), ("minute", 59), ("second", 59))


def split_time(text: str) -> Tuple[str, Optional[re.Match]]:
    """Separate a trailing or leading clock time from the rest of a phrase.

    Returns:
        ``(head, match)`` where ``match`` is the unvalidated clock-time match,
        or ``(text, None)`` when the phrase carries no clock time.
    """
    for pattern in (TRAILING_TIME_PATTERN, LEADING_TIME_PATTERN):
        match = pattern.match(text)
        if match:
            return match.group("head"), match
    return text, None


def to_time_of_day(match: Optional[re.Match]) -> Optional[TimeOfDay]:
    """Validate a clock-time match from :func:`split_time`.

    Raises:
        InvalidDateComponentError: hour not in 0-23, or minute/second not in 0-59
    """
    if match is None:
        return None

    values = {}
    for name, upper in _TIME_FIELDS:
        raw = match.group(name)
        value = int(raw) if raw is not None else 0
        if value > upper:
            logger.debug("Clock time %r has %s out of range", match.group(0), name)
            raise InvalidDateComponentError(name, value)
        values[name] = value
    return TimeOfDay(**values)


def at_time(moment: datetime, time: TimeOfDay) -> datetime:
    """Replace the time-of-day of ``moment``."""
    return moment.replace(hour=time.hour, minute=time.minute, second=time.second, microsecond=0)


def at_midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)
