"""Text-to-number coercion used when parsing time spans."""

from __future__ import annotations

import re

from pytimespan._errors import ERR_MSG_INVALID_DURATION, InvalidDurationError

# Leading numeric prefix: optional sign, digits with single "_" separators,
# optional fraction and exponent.
_NUMERIC_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:\d+(?:_\d+)*(?:\.\d+(?:_\d+)*)?|\.\d+(?:_\d+)*)(?:[eE][+-]?\d+)?)"
)


def loose_float(text: str) -> float:
    """Read the longest leading number from text, or 0.0 if there is none.

    >>> loose_float("12.5 minutes")
    12.5
    >>> loose_float("soon")
    0.0
    """
    m = _NUMERIC_PREFIX_RE.match(text)
    if m is None:
        return 0.0
    return float(m.group(1))


def strict_float(text: str) -> float:
    """Read text as a number, rejecting anything that is not entirely numeric.

    Accepts exactly the numbers ``loose_float`` reads, surrounded by optional
    whitespace; ``"inf"`` and ``"nan"`` are rejected.
    """
    m = _NUMERIC_PREFIX_RE.fullmatch(text.strip())
    if m is None:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"cannot read {text!r} as a number",
        )
    return float(m.group(1))


def decode_text(value: str | bytes) -> str:
    """Return value as str, decoding bytes as UTF-8."""
    if not isinstance(value, bytes):
        return value
    try:
        return value.decode()
    except UnicodeDecodeError as e:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"cannot decode {value!r} as UTF-8 text",
            wrapped=e,
        ) from e
