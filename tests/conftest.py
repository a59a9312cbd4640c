"""Shared fixtures for clockwords tests.

Provides fixed reference instants so every resolved time is deterministic:
- ``now``: Saturday 2026-02-07 14:30 UTC
- ``sunday``: Sunday 2026-02-08 12:00 UTC (weekday arithmetic)
- ``mid_march``: Friday 2024-03-15 10:00 UTC
"""

from datetime import datetime, timezone

import pytest

from clockwords.lang import English, French, German, Spanish
from clockwords.scanner import TimeExpressionScanner, default_scanner


UTC = timezone.utc


def utc(*args: int) -> datetime:
    """Shorthand for an aware UTC datetime."""
    return datetime(*args, tzinfo=UTC)


@pytest.fixture
def now():
    return utc(2026, 2, 7, 14, 30)


@pytest.fixture
def sunday():
    return utc(2026, 2, 8, 12, 0)


@pytest.fixture
def mid_march():
    return utc(2024, 3, 15, 10, 0)


# ---------------------------------------------------------------------------
# Scanners
# ---------------------------------------------------------------------------


@pytest.fixture
def scanner():
    """Scanner with all built-in languages."""
    return default_scanner()


@pytest.fixture
def english():
    return TimeExpressionScanner([English()])


@pytest.fixture
def german():
    return TimeExpressionScanner([German()])


@pytest.fixture
def french():
    return TimeExpressionScanner([French()])


@pytest.fixture
def spanish():
    return TimeExpressionScanner([Spanish()])
