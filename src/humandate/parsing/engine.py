"""Public entry point: phrase + reference instant -> naive datetime.

The engine normalizes the phrase, runs the matcher chain in priority order and
hands the first recognized shape to the resolver. It never reads the system
clock; "now" is always the caller's ``reference_now``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Tuple

from humandate.configuration.settings import DEFAULT_SETTINGS, ParserSettings
from humandate.errors import UnrecognizedFormatError
from humandate.parsing.matchers import DEFAULT_MATCHERS, ShapeMatcher
from humandate.parsing.models import ResolvedShape
from humandate.parsing.normalizer import normalize
from humandate.parsing.resolver import TemporalResolver

logger = logging.getLogger(__name__)


class HumanDateParser:
    """Reusable, thread-safe phrase parser.

    Example:
        >>> parser = HumanDateParser()
        >>> parser.parse("10 hours and 5 minutes ago", datetime(2024, 5, 8, 12))
        datetime.datetime(2024, 5, 8, 1, 55)
    """

    def __init__(
        self,
        settings: Optional[ParserSettings] = None,
        matchers: Optional[Iterable[ShapeMatcher]] = None,
    ):
        self.settings = settings or DEFAULT_SETTINGS
        self.matchers: Tuple[ShapeMatcher, ...] = tuple(matchers) if matchers is not None else DEFAULT_MATCHERS
        self.resolver = TemporalResolver(self.settings)

    def recognize(self, text: str, reference_now: datetime) -> ResolvedShape:
        """Run the matcher chain and return the first recognized shape.

        Raises:
            ParseError: a matcher found its shape malformed, or none matched
        """
        _check_arguments(text, reference_now)
        normalized = normalize(text)

        for matcher in self.matchers:
            shape = matcher.match(normalized, reference_now, self.settings, text)
            if shape is not None:
                logger.debug("Matcher %s recognized %r as %r", matcher.name, normalized, shape)
                return shape

        logger.debug("No matcher recognized %r", normalized)
        raise UnrecognizedFormatError(text)

    def parse(self, text: str, reference_now: datetime) -> datetime:
        """Resolve ``text`` to a naive datetime relative to ``reference_now``.

        Args:
            text: Human phrase such as "last friday at 19:45" or "in 3 days"
            reference_now: Naive datetime standing in for "now"

        Returns:
            Naive datetime

        Raises:
            ParseError: the phrase is unrecognized or malformed
            TypeError: ``text`` is not a string or ``reference_now`` not a datetime
            ValueError: ``reference_now`` carries a timezone
        """
        shape = self.recognize(text, reference_now)
        result = self.resolver.resolve(shape, reference_now, text)
        logger.debug("Resolved %r against %s to %s", text, reference_now, result)
        return result


def _check_arguments(text: str, reference_now: datetime) -> None:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    if not isinstance(reference_now, datetime):
        raise TypeError(f"reference_now must be datetime, not {type(reference_now).__name__}")
    if reference_now.tzinfo is not None:
        raise ValueError("reference_now must be a naive datetime")


_DEFAULT_PARSER = HumanDateParser()


def parse(
    text: str,
    reference_now: datetime,
    settings: Optional[ParserSettings] = None,
) -> datetime:
    """Resolve a human date/time phrase against an explicit reference instant.

    Example:
        >>> parse("last friday at 19:45", datetime(2024, 5, 8))
        datetime.datetime(2024, 5, 3, 19, 45)
    """
    parser = _DEFAULT_PARSER if settings is None else HumanDateParser(settings)
    return parser.parse(text, reference_now)
