"""Precision-aware temporal model.

Treats a UTC calendar date as a value addressable at one of seven precision
levels (year down to millisecond), with truncation, offset arithmetic,
string formatting and parsing, range formatting, and range clamping.

Public API:
-----------
    from geotemporal.dates import (
        # Models
        CalendarInstant,
        PrecisionDate,
        # Operations
        truncate_to_precision,
        offset_at_precision,
        format_at_precision,
        parse_at_precision,
        format_range_at_precision,
        clamp_to_range,
    )

Example:
    >>> from geotemporal.dates import PrecisionDate
    >>> from geotemporal.precision import Precision
    >>> start = PrecisionDate.parse("1999-12", Precision.MONTH)
    >>> start.offset(1).format()
    '2000-01'
"""

from .core import (
    clamp_to_range,
    format_at_precision,
    format_range_at_precision,
    offset_at_precision,
    parse_at_precision,
    truncate_to_precision,
)
from .models import CalendarInstant, PrecisionDate, days_in_month

__all__ = [
    # Models
    "CalendarInstant",
    "PrecisionDate",
    "days_in_month",
    # Operations
    "truncate_to_precision",
    "offset_at_precision",
    "format_at_precision",
    "parse_at_precision",
    "format_range_at_precision",
    "clamp_to_range",
]
