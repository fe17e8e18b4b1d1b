"""Duration text parsing.

Accepts three notations, each with an optional leading sign:

* clock: ``"05:13"`` (minutes and seconds) or ``"1:01:29"`` (hours,
  minutes and seconds), the format produced by ``TimeSpan.pretty()``;
* Go-style unit strings: ``"1h1m29s"``, ``"1.5h"``, ``"250ms"``;
* a bare number of seconds: ``"90"``, ``"2.5"``.
"""

from __future__ import annotations

import logging

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from pytimespan._constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from pytimespan._errors import ERR_MSG_INVALID_DURATION, InvalidDurationError

logger = logging.getLogger(__name__)

DURATION_GRAMMAR = r"""
    start: SIGN? _value

    _value: clock
          | span
          | bare

    clock: NUMBER ":" NUMBER (":" NUMBER)?
    span: component+
    component: NUMBER UNIT
    bare: NUMBER

    SIGN: "+" | "-"
    UNIT: "ms" | "us" | "µs" | "ns" | "h" | "m" | "s"
    NUMBER: /\d+(?:\.\d+)?|\.\d+/

    %import common.WS
    %ignore WS
"""

SECONDS_PER_UNIT: dict[str, float] = {
    "h": SECONDS_PER_HOUR,
    "m": SECONDS_PER_MINUTE,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


class _ClockFieldError(ValueError):
    """A minutes or seconds clock field is outside 0..59."""


class _DurationTransformer(Transformer):
    """Reduce a parse tree to a number of seconds."""

    def start(self, items: list) -> float:
        if len(items) == 2:
            sign, value = items
            return -value if sign == "-" else value
        return items[0]

    def clock(self, items: list[Token]) -> float:
        fields = [float(tok) for tok in items]
        for field in fields[1:]:
            if field >= SECONDS_PER_MINUTE:
                raise _ClockFieldError(f"clock field {field} must be below 60")
        if len(fields) == 3:
            hours, minutes, seconds = fields
        else:
            hours = 0.0
            minutes, seconds = fields
        return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds

    def span(self, items: list[float]) -> float:
        return sum(items)

    def component(self, items: list[Token]) -> float:
        number, unit = items
        return float(number) * SECONDS_PER_UNIT[str(unit)]

    def bare(self, items: list[Token]) -> float:
        return float(items[0])


_parser = Lark(DURATION_GRAMMAR, parser="lalr", transformer=_DurationTransformer())


def parse_duration_seconds(text: str) -> float:
    """Parse duration text and return its length in seconds.

    Raises:
        InvalidDurationError: If the text matches none of the notations.
    """
    try:
        return _parser.parse(text)
    except (LarkError, _ClockFieldError) as e:
        cause = e.orig_exc if isinstance(e, VisitError) else e
        logger.debug("rejected duration text %r: %s", text, cause)
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"cannot parse duration: {text!r}",
            wrapped=cause,
        ) from e
