"""Input normalization for phrase matching."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_TERMINAL_PUNCTUATION = re.compile(r"[.!?;,:]+$")


def normalize(text: str) -> str:
    """Case-fold, collapse whitespace, trim and drop trailing punctuation.

    >>> normalize("  Last   Friday at 19:45! ")
    'last friday at 19:45'
    """
    folded = _WHITESPACE.sub(" ", text.casefold()).strip()
    return _TERMINAL_PUNCTUATION.sub("", folded).rstrip()
