"""Shared test fixtures."""

import pytest

from pytimespan import TimeSpan, TimeSpanSerializer, Unit


@pytest.fixture
def one_hour_span():
    """1 hour, 1 minute, 29 seconds."""
    return TimeSpan.from_seconds(3689)


@pytest.fixture
def five_minute_span():
    """5 minutes, 13 seconds."""
    return TimeSpan.from_seconds(313)


@pytest.fixture
def minutes_serializer():
    return TimeSpanSerializer(Unit.MINUTES)
