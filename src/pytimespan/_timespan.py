"""The TimeSpan value type."""

from __future__ import annotations

import math
import numbers
from datetime import timedelta
from decimal import Decimal
from typing import Any

from pytimespan._coercion import decode_text, loose_float, strict_float
from pytimespan._constants import (
    HOURS_TOKEN,
    MINUTES_TOKEN,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_TOKEN,
)
from pytimespan._duration_parser import parse_duration_seconds
from pytimespan._errors import (
    ERR_MSG_NOT_A_NUMBER,
    ERR_MSG_TEMPLATE_REQUIRED,
    ERR_MSG_VALUE_REQUIRED,
    InvalidArgumentError,
)
from pytimespan._units import Unit, resolve_unit

_NUMERIC_TYPES = (numbers.Real, Decimal)

_WHOLE_SECONDS_PER_MINUTE = int(SECONDS_PER_MINUTE)
_WHOLE_SECONDS_PER_HOUR = int(SECONDS_PER_HOUR)


def _require(value: Any) -> None:
    if value is None:
        raise InvalidArgumentError(ERR_MSG_VALUE_REQUIRED)


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // divisor
    return -quotient if dividend < 0 else quotient


def _ieee_divide(dividend: float, divisor: float) -> float:
    if divisor != 0.0:
        return dividend / divisor
    if dividend == 0.0 or math.isnan(dividend):
        return math.nan
    return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _number_text(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class TimeSpan(float):
    """A duration measured in seconds.

    A TimeSpan is a ``float`` holding the total number of seconds, so it
    compares, sorts and hashes like that number and can be passed anywhere
    a plain number is expected. It is immutable; every operator returns a
    new TimeSpan.

    Examples:
        >>> span = TimeSpan.from_seconds(3689)
        >>> span.hours, span.minutes, span.seconds
        (1, 1, 29.0)
        >>> span.pretty()
        '1:01:29'
        >>> TimeSpan.from_minutes(5) + 13
        05:13
    """

    __slots__ = ()

    def __new__(cls, value: Any, unit: Unit | str = Unit.SECONDS) -> TimeSpan:
        _require(value)
        if isinstance(value, bool) or not isinstance(value, _NUMERIC_TYPES):
            raise InvalidArgumentError(
                ERR_MSG_NOT_A_NUMBER,
                f"cannot build a time span from {type(value).__name__} {value!r}",
            )
        factor = resolve_unit(unit).factor
        return super().__new__(cls, float(value) * factor)

    # --- Construction ---

    @classmethod
    def from_seconds(cls, seconds: Any) -> TimeSpan:
        return cls(seconds, Unit.SECONDS)

    @classmethod
    def from_minutes(cls, minutes: Any) -> TimeSpan:
        return cls(minutes, Unit.MINUTES)

    @classmethod
    def from_hours(cls, hours: Any) -> TimeSpan:
        return cls(hours, Unit.HOURS)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> TimeSpan:
        _require(delta)
        if not isinstance(delta, timedelta):
            raise InvalidArgumentError(
                ERR_MSG_NOT_A_NUMBER,
                f"cannot build a time span from {type(delta).__name__} {delta!r}",
            )
        return cls(delta.total_seconds())

    @classmethod
    def parse(
        cls, text: Any, unit: Unit | str = Unit.SECONDS, *, strict: bool = False
    ) -> TimeSpan:
        """Create a TimeSpan from numeric text in the given unit.

        By default the leading number in ``text`` is used and text without
        one reads as zero (``"12abc"`` is 12, ``"abc"`` is 0). Pass
        ``strict=True`` to reject anything that is not entirely a number.

        Raises:
            InvalidArgumentError: If text is None.
            InvalidDurationError: If strict and text is not a number, or if
                text is bytes that are not valid UTF-8.
        """
        _require(text)
        if isinstance(text, _NUMERIC_TYPES) and not isinstance(text, bool):
            return cls(text, unit)
        text = str(decode_text(text))
        value = strict_float(text) if strict else loose_float(text)
        return cls(value, unit)

    @classmethod
    def parse_duration(cls, text: str) -> TimeSpan:
        """Create a TimeSpan from clock (``"1:01:29"``) or unit (``"1h1m29s"``) text.

        Raises:
            InvalidArgumentError: If text is None.
            InvalidDurationError: If text is not valid duration notation.
        """
        _require(text)
        return cls(parse_duration_seconds(str(text)))

    @staticmethod
    def dump(value: Any) -> float | None:
        """Convert a TimeSpan to the number of seconds stored by persistence layers."""
        from pytimespan.serializer import SECONDS_SERIALIZER

        return SECONDS_SERIALIZER.dump(value)

    @staticmethod
    def load(value: Any) -> TimeSpan | None:
        """Create a TimeSpan from a number, numeric or duration text, or a TimeSpan."""
        from pytimespan.serializer import SECONDS_SERIALIZER

        return SECONDS_SERIALIZER.load(value)

    # --- Accessors ---

    def total_seconds(self) -> float:
        return float(self)

    def total_minutes(self) -> float:
        return float(self) / SECONDS_PER_MINUTE

    def total_hours(self) -> float:
        return float(self) / SECONDS_PER_HOUR

    @property
    def hours(self) -> int:
        """Whole hours, truncated toward zero."""
        return _trunc_div(int(self), _WHOLE_SECONDS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Whole minutes past the hour, in 0..59."""
        return _trunc_div(int(self), _WHOLE_SECONDS_PER_MINUTE) % _WHOLE_SECONDS_PER_MINUTE

    @property
    def seconds(self) -> float:
        """Seconds past the minute, keeping the fractional part."""
        return float(self) % SECONDS_PER_MINUTE

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=float(self))

    # --- Formatting ---

    def format(self, template: str) -> str:
        """Substitute ``%h``, ``%m`` and ``%s`` in template with the components.

        >>> TimeSpan(3661).format("%h hours %m minutes %s seconds")
        '1 hours 1 minutes 1 seconds'

        A non-finite span renders every token as its float text, the same
        text ``pretty()`` returns.
        """
        if template is None:
            raise InvalidArgumentError(ERR_MSG_TEMPLATE_REQUIRED)
        if math.isfinite(self):
            hours = str(self.hours)
            minutes = str(self.minutes)
            seconds = _number_text(self.seconds)
        else:
            hours = minutes = seconds = repr(float(self))
        result = template.replace(HOURS_TOKEN, hours)
        result = result.replace(MINUTES_TOKEN, minutes)
        result = result.replace(SECONDS_TOKEN, seconds)
        return result

    def pretty(self) -> str:
        """Return ``H:MM:SS``, or ``MM:SS`` when there are no whole hours.

        05:13    (5 minutes 13 seconds)
        3:01:29  (3 hours 1 minute 29 seconds)
        """
        if not math.isfinite(self):
            return repr(float(self))
        clock = f"{self.minutes:02d}:{int(self.seconds):02d}"
        if self.hours > 0:
            return f"{self.hours}:{clock}"
        return clock

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return self.pretty()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.pretty()
        return float(self).__format__(format_spec)

    # --- Arithmetic ---

    def __add__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(self) + float(_coerce(other)))

    def __radd__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(_coerce(other)) + float(self))

    def __sub__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(self) - float(_coerce(other)))

    def __rsub__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(_coerce(other)) - float(self))

    def __mul__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(self) * float(_coerce(other)))

    def __rmul__(self, other: Any) -> TimeSpan:
        return TimeSpan(float(_coerce(other)) * float(self))

    def __truediv__(self, other: Any) -> TimeSpan:
        return TimeSpan(_ieee_divide(float(self), float(_coerce(other))))

    def __rtruediv__(self, other: Any) -> TimeSpan:
        return TimeSpan(_ieee_divide(float(_coerce(other)), float(self)))

    def __neg__(self) -> TimeSpan:
        return TimeSpan(-float(self))

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return TimeSpan(abs(float(self)))


def _coerce(other: Any) -> TimeSpan:
    """Turn an arithmetic operand into a TimeSpan via the seconds serializer."""
    _require(other)
    return TimeSpan.load(other)
