"""pytimespan - A duration value type measured in seconds."""

from __future__ import annotations

try:
    from pytimespan._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging
from typing import Any

from pytimespan._errors import (
    InvalidArgumentError,
    InvalidDurationError,
    TimeSpanError,
    UnsupportedUnitError,
)
from pytimespan._timespan import TimeSpan
from pytimespan._units import Unit
from pytimespan.serializer import SECONDS_SERIALIZER, TimeSpanSerializer

__all__ = [
    "dump",
    "from_hours",
    "from_minutes",
    "from_seconds",
    "load",
    "parse",
    "parse_duration",
    "TimeSpan",
    "TimeSpanSerializer",
    "Unit",
    "InvalidArgumentError",
    "InvalidDurationError",
    "TimeSpanError",
    "UnsupportedUnitError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def from_seconds(seconds: Any) -> TimeSpan:
    """Create a TimeSpan of the given number of seconds."""
    return TimeSpan.from_seconds(seconds)


def from_minutes(minutes: Any) -> TimeSpan:
    """Create a TimeSpan of the given number of minutes."""
    return TimeSpan.from_minutes(minutes)


def from_hours(hours: Any) -> TimeSpan:
    """Create a TimeSpan of the given number of hours."""
    return TimeSpan.from_hours(hours)


def parse(text: Any, unit: Unit | str = Unit.SECONDS, *, strict: bool = False) -> TimeSpan:
    """Create a TimeSpan from numeric text in the given unit.

    Args:
        text: The text to read. Its leading number is used; text without
            one reads as zero unless ``strict`` is set.
        unit: Unit the number is expressed in. Defaults to seconds.
        strict: If True, reject text that is not entirely a number.

    Returns:
        The parsed TimeSpan.

    Raises:
        InvalidArgumentError: If text is None.
        InvalidDurationError: If strict is True and text is not a number.
        UnsupportedUnitError: If unit is not a known unit.
    """
    return TimeSpan.parse(text, unit, strict=strict)


def parse_duration(text: str) -> TimeSpan:
    """Create a TimeSpan from clock or unit notation.

    Args:
        text: ``"05:13"``, ``"1:01:29"``, ``"1h1m29s"``, ``"250ms"`` or a
            bare number of seconds, optionally signed.

    Returns:
        The parsed TimeSpan.

    Raises:
        InvalidArgumentError: If text is None.
        InvalidDurationError: If text is not valid duration notation.
    """
    return TimeSpan.parse_duration(text)


def dump(value: Any) -> float | None:
    """Convert a TimeSpan to the number of seconds a persistence layer stores."""
    return SECONDS_SERIALIZER.dump(value)


def load(value: Any) -> TimeSpan | None:
    """Create a TimeSpan from a stored number, text, timedelta or TimeSpan."""
    return SECONDS_SERIALIZER.load(value)
