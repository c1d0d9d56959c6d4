"""Duration phrase parsing.

Turns "in 5 minutes and 30 seconds", "2 hours, 32 minutes and 7 seconds ago"
or "a year ago" into a signed :class:`~humandate.parsing.models.Duration`.

Grammar:
    phrase    := "in" terms | terms "ago"
    terms     := term (("," | "and" | ", and") term)*
    term      := quantity unit
    quantity  := digits | "a" | "an"
    unit      := second(s) | minute(s) | hour(s) | day(s) | week(s) | month(s) | year(s)
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Optional

from humandate.errors import (
    ConflictingModifiersError,
    InvalidNumberError,
    UnrecognizedFormatError,
)
from humandate.parsing.models import Duration, DurationTerm, DurationUnit, Sign

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lookup Tables
# ---------------------------------------------------------------------------

UNIT_NAMES = MappingProxyType({
    **{unit.value: unit for unit in DurationUnit},
    **{unit.value + "s": unit for unit in DurationUnit},
})

WORD_QUANTITIES = MappingProxyType({
    "a": 1,
    "an": 1,
})

_FUTURE_MARKER = re.compile(r"^in\s+")
_PAST_MARKER = re.compile(r"\s*\bago$")
_TERM_SEPARATOR = re.compile(r"\s*,\s*(?:and\s+)?|\s+and\s+")
_DIGITS = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def looks_like_duration(text: str) -> bool:
    """Whether ``text`` claims the relative-offset shape.

    True when it carries a direction marker ("in ...", "... ago") or ends in a
    quantity and a unit name ("3 days"). Claimed phrases that are then
    malformed raise rather than fall through to "unrecognized".
    """
    if _FUTURE_MARKER.match(text) or _PAST_MARKER.search(text):
        return True
    tokens = text.split()
    return len(tokens) >= 2 and tokens[-1] in UNIT_NAMES and _is_quantity(tokens[-2])


def parse_duration(text: str, original: Optional[str] = None) -> Duration:
    """Parse a normalized duration phrase.

    Args:
        text: Normalized phrase, e.g. "10 hours and 5 minutes ago"
        original: Caller's raw input, reported in UnrecognizedFormatError

    Returns:
        Duration with summed per-unit quantities and its sign

    Raises:
        ConflictingModifiersError: both "in" and "ago", or neither
        InvalidNumberError: quantity is not digits or "a"/"an"
        UnrecognizedFormatError: unknown unit or malformed term
    """
    original = text if original is None else original

    body = text
    future = bool(_FUTURE_MARKER.match(body))
    if future:
        body = _FUTURE_MARKER.sub("", body, count=1)
    past = bool(_PAST_MARKER.search(body))
    if past:
        body = _PAST_MARKER.sub("", body, count=1)

    if future == past:
        logger.debug("Duration %r has %s direction marker", text, "both" if future else "no")
        raise ConflictingModifiersError(original)

    terms = tuple(_parse_term(chunk, original) for chunk in _TERM_SEPARATOR.split(body))
    return Duration.from_terms(terms, Sign.FUTURE if future else Sign.PAST)


def _parse_term(chunk: str, original: str) -> DurationTerm:
    tokens = chunk.split()
    if len(tokens) != 2:
        raise UnrecognizedFormatError(original)
    quantity_token, unit_token = tokens

    unit = UNIT_NAMES.get(unit_token)
    if unit is None:
        # an unknown unit next to a bad number is still an unknown phrase
        raise UnrecognizedFormatError(original)

    return DurationTerm(quantity=_parse_quantity(quantity_token), unit=unit)


def _is_quantity(token: str) -> bool:
    return token in WORD_QUANTITIES or _DIGITS.fullmatch(token) is not None


def _parse_quantity(token: str) -> int:
    if token in WORD_QUANTITIES:
        return WORD_QUANTITIES[token]
    if not _is_quantity(token):
        raise InvalidNumberError(token)
    try:
        return int(token)
    except ValueError as exc:  # digit strings past the int conversion limit
        raise InvalidNumberError(token) from exc

