"""Parser configuration."""

from humandate.configuration.settings import (
    DEFAULT_SETTINGS,
    ParserSettings,
    TimeOfDayPolicy,
    WeekdayPolicy,
    load_settings,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "ParserSettings",
    "TimeOfDayPolicy",
    "WeekdayPolicy",
    "load_settings",
]
