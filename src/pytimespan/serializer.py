"""Conversion between TimeSpan and the primitive value a persistence layer stores.

Persistence frameworks call ``dump`` before writing a column and ``load``
after reading one. A serializer stores a span as a plain ``float`` counted
in its configured unit; ``None`` passes through both ways so nullable
columns round-trip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from pytimespan._coercion import decode_text, strict_float
from pytimespan._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_NOT_A_NUMBER,
    InvalidArgumentError,
    InvalidDurationError,
)
from pytimespan._timespan import _NUMERIC_TYPES, TimeSpan
from pytimespan._units import Unit, resolve_unit

logger = logging.getLogger(__name__)

__all__ = ["SECONDS_SERIALIZER", "TimeSpanSerializer"]


@dataclass(frozen=True)
class TimeSpanSerializer:
    """Dump/load pair for one storage unit."""

    unit: Unit = Unit.SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", resolve_unit(self.unit))

    def dump(self, value: Any) -> float | None:
        """Return the span's length in this serializer's unit.

        Values that are not yet a TimeSpan are read with ``load`` first.
        """
        span = self.load(value)
        if span is None:
            return None
        return span.total_seconds() / self.unit.factor

    def load(self, value: Any) -> TimeSpan | None:
        """Build a TimeSpan from a stored or user-supplied value.

        Accepts None (returned as None), a TimeSpan (returned unchanged),
        a number in this serializer's unit, a ``timedelta``, or text holding
        either a number in this unit or clock/unit duration notation.

        Raises:
            InvalidArgumentError: If value has an unsupported type.
            InvalidDurationError: If text cannot be read as a duration.
        """
        if value is None or isinstance(value, TimeSpan):
            return value
        if isinstance(value, timedelta):
            return TimeSpan.from_timedelta(value)
        if isinstance(value, bool) or not isinstance(value, (*_NUMERIC_TYPES, str, bytes)):
            err = InvalidArgumentError(
                ERR_MSG_NOT_A_NUMBER,
                f"cannot load a time span from {type(value).__name__} {value!r}",
            )
            logger.debug("%s", err.internal())
            raise err
        if isinstance(value, (str, bytes)):
            return self._load_text(value)
        return TimeSpan(value, self.unit)

    def _load_text(self, value: str | bytes) -> TimeSpan:
        text = decode_text(value).strip()
        if not text:
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"cannot load a time span from empty text {value!r}",
            )
        try:
            return TimeSpan(strict_float(text), self.unit)
        except InvalidDurationError:
            logger.debug("%r is not numeric, reading it as duration notation", text)
        return TimeSpan.parse_duration(text)


SECONDS_SERIALIZER = TimeSpanSerializer(Unit.SECONDS)
"""Shared serializer storing spans as seconds."""
