"""Shared fixtures for humandate tests.

Provides fixed reference instants so every expectation is independent of the
machine clock.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from humandate.configuration.settings import DEFAULT_SETTINGS
from humandate.parsing.engine import HumanDateParser


@pytest.fixture
def wednesday_midnight() -> datetime:
    """Wednesday 2024-05-08 00:00:00; its week starts Monday 2024-05-06."""
    return datetime(2024, 5, 8)


@pytest.fixture
def wednesday_noon() -> datetime:
    """Wednesday 2024-05-08 12:00:00."""
    return datetime(2024, 5, 8, 12, 0, 0)


@pytest.fixture
def afternoon_reference() -> datetime:
    """Monday 2024-01-15 14:30:45."""
    return datetime(2024, 1, 15, 14, 30, 45)


@pytest.fixture
def reference_instants() -> list:
    """Spread of references: leap day, year ends, week boundaries, odd times."""
    return [
        datetime(2024, 5, 8),
        datetime(2024, 5, 8, 12, 0),
        datetime(2024, 2, 29, 23, 59, 59),
        datetime(2023, 12, 31, 23, 0),
        datetime(2024, 1, 1, 0, 0, 1),
        datetime(2024, 5, 12, 18, 45, 3),
        datetime(2024, 5, 6, 6, 7, 8, 123456),
        datetime(1999, 3, 1, 1, 1, 1),
    ]


@pytest.fixture
def parser() -> HumanDateParser:
    return HumanDateParser(DEFAULT_SETTINGS)
