"""Precision-aware date operations.

Pure functions over CalendarInstant values (datetime.datetime is accepted
wherever a date is expected and converted on the way in). Inputs are never
modified; every operation returns a new instant, except clamp_to_range which
returns one of its arguments.

Date strings use the ``year-month-day`` layout with a configurable delimiter:

- Month and day are zero-padded to two digits, month is 1-indexed.
- Years are padded to four digits; negative years render as ``-`` followed
  by the magnitude padded to six digits (extended ISO 8601).
- Only the segments meaningful at the requested precision are written.
  Nothing finer than the day is rendered.

Example:
    >>> from geotemporal.dates import parse_at_precision, format_at_precision
    >>> from geotemporal.precision import Precision
    >>> d = parse_at_precision("-0099-03-15", Precision.DAY)
    >>> format_at_precision(d, Precision.DAY)
    '-000099-03-15'
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Optional, Union

from ..exceptions import MalformedDateStringError
from ..precision import ALL_FIELDS, CALENDAR_FIELDS, Precision
from ..utils import parse_int_prefix
from .models import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, CalendarInstant

__all__ = [
    "truncate_to_precision",
    "offset_at_precision",
    "format_at_precision",
    "parse_at_precision",
    "format_range_at_precision",
    "clamp_to_range",
]

logger = logging.getLogger(__name__)

DateLike = Union[CalendarInstant, datetime]

# Fixed-length units; YEAR and MONTH are handled through calendar carry instead.
_UNIT_MS = {
    Precision.DAY: MS_PER_DAY,
    Precision.HOUR: MS_PER_HOUR,
    Precision.MINUTE: MS_PER_MINUTE,
    Precision.SECOND: MS_PER_SECOND,
    Precision.MILLISECOND: 1,
}

# Segments rendered by format_at_precision: year, month, day.
_FORMATTED_SEGMENTS = 3


def _as_instant(date: DateLike) -> CalendarInstant:
    if isinstance(date, CalendarInstant):
        return date
    if isinstance(date, datetime):
        return CalendarInstant.from_datetime(date)
    raise TypeError(f"Expected CalendarInstant or datetime, got {type(date).__name__}")


# ============================================================================
# Truncation & Offsets
# ============================================================================


def truncate_to_precision(date: DateLike, precision: int) -> CalendarInstant:
    """Reset every field finer than precision to its zero point.

    Fields at or coarser than precision are kept. Passing ALL_FIELDS clears
    the year as well, giving 0000-01-01T00:00:00.000.

    Args:
        date: Instant to truncate
        precision: Precision level, or ALL_FIELDS

    Returns:
        New truncated instant
    """
    instant = _as_instant(date)
    if precision < ALL_FIELDS:
        precision = ALL_FIELDS

    cleared = {field.name: field.zero_point for field in CALENDAR_FIELDS[precision + 1 :]}
    if not cleared:
        return instant

    # Month before day: every month has a day 1, so no field needs carrying.
    return instant.model_copy(update=cleared)


def offset_at_precision(date: DateLike, precision: Precision, offset: int) -> CalendarInstant:
    """Add offset to the field addressed by precision.

    Overflow carries into coarser fields the way native date setters do
    (2020-01-31 plus one month is 2020-03-02). Finer fields are kept as they
    are; truncate the result when a normalized value is needed.

    Args:
        date: Starting instant
        precision: Field to shift
        offset: Signed number of units

    Returns:
        New shifted instant
    """
    instant = _as_instant(date)
    precision = Precision(precision)

    if precision in _UNIT_MS:
        return CalendarInstant.from_epoch_ms(instant.epoch_ms + offset * _UNIT_MS[precision])

    fields = instant.model_dump()
    fields[CALENDAR_FIELDS[precision].name] += offset
    return CalendarInstant.from_fields(**fields)


# ============================================================================
# String Formatting & Parsing
# ============================================================================


def _format_year(year: int) -> str:
    if year < 0:
        # Six digits for negative years, as in extended ISO 8601.
        return f"-{-year:06d}"
    return f"{year:04d}"


def format_at_precision(date: DateLike, precision: Precision, *, delimiter: str = "-") -> str:
    """Render the year/month/day segments meaningful at precision.

    Args:
        date: Instant to render
        precision: YEAR gives ``YYYY``, MONTH ``YYYY-MM``, DAY and finer ``YYYY-MM-DD``
        delimiter: Segment separator

    Returns:
        Formatted date string
    """
    instant = _as_instant(date)
    segments = [
        _format_year(instant.year),
        f"{instant.month:02d}",
        f"{instant.day:02d}",
    ]
    count = min(max(int(precision) + 1, 0), _FORMATTED_SEGMENTS)
    return delimiter.join(segments[:count])


def parse_at_precision(date_string: str, precision: Precision, *, delimiter: str = "-") -> CalendarInstant:
    """Parse a ``year-month-day`` string into an instant at precision.

    Segments need no padding. A leading ``-`` makes the year negative. Missing
    month or day default to 1; segments past the day are ignored. Information
    finer than precision is discarded, so "2345-6-7" at MONTH precision is
    June 2345 and "2345-6" at DAY precision is 2345-06-01.

    Out-of-range month or day values carry like native date setters
    ("2021-13-01" is 2022-01-01).

    Args:
        date_string: Date string to parse
        precision: Precision of the result
        delimiter: Segment separator

    Returns:
        Instant truncated to precision

    Raises:
        MalformedDateStringError: If the delimiter is empty, or the year
            segment is missing or not numeric
    """
    if not delimiter:
        raise MalformedDateStringError(
            f'Cannot parse "{date_string}": delimiter must be a non-empty string.',
            context={"date_string": date_string, "delimiter": delimiter},
        )

    is_negative_year = date_string[:1] == "-"
    unsigned = date_string[1:] if is_negative_year else date_string
    values = [parse_int_prefix(segment) for segment in unsigned.split(delimiter)]

    absolute_year = values[0]
    if absolute_year is None:
        logger.debug("Rejecting date string %r: no year segment", date_string)
        raise MalformedDateStringError(
            f'"{date_string}" is not a valid date string: year info missing.',
            context={"date_string": date_string, "delimiter": delimiter},
        )

    year = -absolute_year if is_negative_year else absolute_year
    month = values[1] if len(values) > 1 and values[1] is not None else 1
    day = values[2] if len(values) > 2 and values[2] is not None else 1

    return truncate_to_precision(CalendarInstant.from_fields(year, month, day), precision)


def format_range_at_precision(
    precision: Precision,
    start: Optional[DateLike],
    end: Optional[DateLike],
    *,
    delimiter: str = "-",
    separator: str = " - ",
) -> str:
    """Render a start/end pair as ``start - end``.

    Returns an empty string when both endpoints are missing; a single missing
    endpoint renders as an empty segment. Ordering is not checked.
    """
    if start is None and end is None:
        return ""

    return separator.join(
        "" if date is None else format_at_precision(date, precision, delimiter=delimiter)
        for date in (start, end)
    )


# ============================================================================
# Range Clamping
# ============================================================================


def _epoch_ms(date: DateLike) -> int:
    return _as_instant(date).epoch_ms


def clamp_to_range(date: DateLike, min_date: DateLike, max_date: DateLike) -> DateLike:
    """Clamp date into [min_date, max_date].

    The upper bound is applied first and the lower bound second, so when
    max_date precedes min_date the result is min_date. The returned object is
    one of the arguments, never a copy.
    """
    result = date

    if _epoch_ms(result) > _epoch_ms(max_date):
        result = max_date

    if _epoch_ms(result) < _epoch_ms(min_date):
        result = min_date

    return result
