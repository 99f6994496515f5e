"""Precision levels for calendar dates.

A precision is the finest calendar field at which a date is meaningful. Fields
finer than the precision sit at their zero point (January, day 1, midnight).

Levels are ordered coarsest to finest, so they compare and slice as integers:

    YEAR(0) < MONTH(1) < DAY(2) < HOUR(3) < MINUTE(4) < SECOND(5) < MILLISECOND(6)

Resolution names are the strings used at configuration and request
boundaries ("year", "month", "date"/"day", ...). Lookup is exact and
case-sensitive; unknown names raise UnknownPrecisionNameError.

Example:
--------
>>> from geotemporal.precision import Precision, get_precision_by_resolution
>>> get_precision_by_resolution("month")
<Precision.MONTH: 1>
>>> Precision.DAY > Precision.MONTH
True
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from .exceptions import UnknownPrecisionNameError

__all__ = [
    "Precision",
    "ALL_FIELDS",
    "CalendarField",
    "CALENDAR_FIELDS",
    "RESOLUTION_TO_PRECISION",
    "ALL_RESOLUTION_NAMES",
    "get_precision_by_resolution",
]


class Precision(IntEnum):
    """Granularity of a calendar date, coarsest first."""

    YEAR = 0
    MONTH = 1
    DAY = 2
    HOUR = 3
    MINUTE = 4
    SECOND = 5
    MILLISECOND = 6


# Sentinel below YEAR: truncating to it clears every field, year included.
ALL_FIELDS = -1


class CalendarField(NamedTuple):
    """One row of the field table: attribute name and its zero point."""

    name: str
    zero_point: int


# Indexed by Precision, coarsest to finest.
CALENDAR_FIELDS: tuple[CalendarField, ...] = (
    CalendarField("year", 0),
    CalendarField("month", 1),
    CalendarField("day", 1),
    CalendarField("hour", 0),
    CalendarField("minute", 0),
    CalendarField("second", 0),
    CalendarField("millisecond", 0),
)

RESOLUTION_TO_PRECISION: dict[str, Precision] = {
    "year": Precision.YEAR,
    "month": Precision.MONTH,
    "date": Precision.DAY,
    "day": Precision.DAY,  # alias of "date"
    "hour": Precision.HOUR,
    "minute": Precision.MINUTE,
    "second": Precision.SECOND,
    "millisecond": Precision.MILLISECOND,
}

ALL_RESOLUTION_NAMES: tuple[str, ...] = tuple(RESOLUTION_TO_PRECISION)


def get_precision_by_resolution(resolution: str) -> Precision:
    """Resolve a resolution name to its Precision.

    Args:
        resolution: One of ALL_RESOLUTION_NAMES (exact, case-sensitive)

    Returns:
        Matching Precision level

    Raises:
        UnknownPrecisionNameError: If the name is not a known resolution
    """
    try:
        return RESOLUTION_TO_PRECISION[resolution]
    except (KeyError, TypeError):
        raise UnknownPrecisionNameError(
            f"Unknown resolution {resolution!r}, expected one of {', '.join(ALL_RESOLUTION_NAMES)}",
            context={"resolution": resolution},
        ) from None
