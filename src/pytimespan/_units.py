"""Units a time span can be expressed in."""

from __future__ import annotations

import enum

from pytimespan._constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from pytimespan._errors import ERR_MSG_UNSUPPORTED_UNIT, UnsupportedUnitError


class Unit(enum.StrEnum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"

    @property
    def factor(self) -> float:
        """Length of one of this unit in seconds."""
        return UNIT_FACTORS[self]


UNIT_FACTORS: dict[Unit, float] = {
    Unit.SECONDS: 1.0,
    Unit.MINUTES: SECONDS_PER_MINUTE,
    Unit.HOURS: SECONDS_PER_HOUR,
}


def resolve_unit(unit: Unit | str) -> Unit:
    """Return the Unit for a member or its string value."""
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError as e:
        raise UnsupportedUnitError(
            ERR_MSG_UNSUPPORTED_UNIT,
            f"unknown unit {unit!r}, expected one of {[u.value for u in Unit]}",
            wrapped=e,
        ) from e
