"""humandate: turn human date/time phrases into naive datetimes.

    >>> from datetime import datetime
    >>> from humandate import parse
    >>> parse("in 3 days", datetime(2024, 5, 8, 12, 0))
    datetime.datetime(2024, 5, 11, 12, 0)
"""

from humandate.configuration.settings import (
    DEFAULT_SETTINGS,
    ParserSettings,
    TimeOfDayPolicy,
    WeekdayPolicy,
)
from humandate.errors import (
    ConflictingModifiersError,
    DateOutOfRangeError,
    HumanDateError,
    InvalidDateComponentError,
    InvalidNumberError,
    ParseError,
    UnrecognizedFormatError,
)
from humandate.parsing.engine import HumanDateParser, parse

__version__ = "0.1.0"

__all__ = [
    "parse",
    "HumanDateParser",
    "ParserSettings",
    "DEFAULT_SETTINGS",
    "WeekdayPolicy",
    "TimeOfDayPolicy",
    "HumanDateError",
    "ParseError",
    "UnrecognizedFormatError",
    "InvalidNumberError",
    "InvalidDateComponentError",
    "ConflictingModifiersError",
    "DateOutOfRangeError",
]
