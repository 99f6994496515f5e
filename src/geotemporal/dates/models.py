"""Dates module-local models.

Defines the two value types of the temporal model:

- CalendarInstant: a UTC instant in the proleptic Gregorian calendar, held as
  calendar fields. Unlike datetime.datetime it supports year 0 and negative
  (BC-style) years, which the date-string format can express.
- PrecisionDate: a CalendarInstant paired with the Precision it is meaningful
  at. Construction rejects instants that carry information finer than the
  precision; use PrecisionDate.at() to truncate on the way in.

Both models are frozen; derive new values with the operations in
geotemporal.dates.core or with model_copy(update={...}).

Day arithmetic uses the days-from-civil algorithm, so the conversion between
calendar fields and epoch milliseconds is exact for any integer year.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..precision import CALENDAR_FIELDS, Precision

__all__ = ["CalendarInstant", "PrecisionDate", "days_in_month"]

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

# Days between 0000-03-01 and 1970-01-01.
_EPOCH_SHIFT_DAYS = 719468
_DAYS_PER_ERA = 146097


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (1-12) of a proleptic Gregorian year."""
    if month == 2:
        return 29 if _is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a valid calendar date."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT_DAYS


def _civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of _days_from_civil."""
    days += _EPOCH_SHIFT_DAYS
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


class CalendarInstant(BaseModel):
    """UTC instant expressed as proleptic Gregorian calendar fields.

    Attributes:
        year: Astronomical year (0 and negative years allowed)
        month: Month of year, 1-12
        day: Day of month, 1 to the month's length
        hour: 0-23
        minute: 0-59
        second: 0-59
        millisecond: 0-999

    Instants order and compare by the moment they denote.

    Example:
        >>> CalendarInstant(year=2020, month=2, day=29).epoch_ms
        1582934400000
        >>> CalendarInstant.from_fields(2020, 13, 1)
        CalendarInstant(year=2021, month=1, day=1, hour=0, minute=0, second=0, millisecond=0)
    """

    model_config = {"frozen": True, "extra": "forbid"}

    year: int = Field(..., description="Astronomical year; year 0 is 1 BC, negative years precede it")
    month: int = Field(default=1, ge=1, le=12, description="Month of year (1 = January)")
    day: int = Field(default=1, ge=1, le=31, description="Day of month")
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)
    millisecond: int = Field(default=0, ge=0, le=999)

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CalendarInstant":
        """Reject days past the end of the month (e.g. February 30)."""
        limit = days_in_month(self.year, self.month)
        if self.day > limit:
            raise ValueError(f"day must be <= {limit} for {self.year}-{self.month:02d}, got {self.day}")
        return self

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "CalendarInstant":
        """Build an instant, carrying out-of-range fields into coarser ones.

        Overflow rolls over the way native date setters do: month 13 is
        January of the next year, day 0 is the last day of the previous
        month, hour 24 is midnight of the next day.
        """
        carry_year, month_index = divmod(month - 1, 12)
        days = _days_from_civil(year + carry_year, month_index + 1, 1) + day - 1
        epoch_ms = days * MS_PER_DAY + hour * MS_PER_HOUR + minute * MS_PER_MINUTE + second * MS_PER_SECOND + millisecond
        return cls.from_epoch_ms(epoch_ms)

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int) -> "CalendarInstant":
        """Build an instant from milliseconds since 1970-01-01T00:00:00Z."""
        days, ms_of_day = divmod(int(epoch_ms), MS_PER_DAY)
        year, month, day = _civil_from_days(days)
        hour, rest = divmod(ms_of_day, MS_PER_HOUR)
        minute, rest = divmod(rest, MS_PER_MINUTE)
        second, millisecond = divmod(rest, MS_PER_SECOND)
        return cls(year=year, month=month, day=day, hour=hour, minute=minute, second=second, millisecond=millisecond)

    @classmethod
    def from_datetime(cls, value: datetime) -> "CalendarInstant":
        """Convert a datetime; naive values are read as UTC.

        Microseconds below the millisecond are dropped.
        """
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
        )

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime.

        Raises:
            ValueError: If the year is outside datetime's 1..9999 range
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.millisecond * 1000,
            tzinfo=timezone.utc,
        )

    @property
    def epoch_ms(self) -> int:
        """Milliseconds since 1970-01-01T00:00:00Z (negative before it)."""
        days = _days_from_civil(self.year, self.month, self.day)
        return days * MS_PER_DAY + self.hour * MS_PER_HOUR + self.minute * MS_PER_MINUTE + self.second * MS_PER_SECOND + self.millisecond

    def isoformat(self) -> str:
        """Extended ISO 8601 rendering, e.g. ``-000099-03-15T00:00:00.000Z``."""
        if self.year < 0:
            year = f"-{-self.year:06d}"
        elif self.year > 9999:
            year = f"+{self.year:06d}"
        else:
            year = f"{self.year:04d}"
        return f"{year}-{self.month:02d}-{self.day:02d}T{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.millisecond:03d}Z"

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInstant):
            return NotImplemented
        return self.epoch_ms < other.epoch_ms

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInstant):
            return NotImplemented
        return self.epoch_ms <= other.epoch_ms

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInstant):
            return NotImplemented
        return self.epoch_ms > other.epoch_ms

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, CalendarInstant):
            return NotImplemented
        return self.epoch_ms >= other.epoch_ms


class PrecisionDate(BaseModel):
    """Calendar instant that is meaningful only down to a precision.

    Every field finer than precision holds its zero point. The invariant is
    checked at construction, so a PrecisionDate is always normalized.

    Attributes:
        instant: Normalized calendar instant
        precision: Finest meaningful field

    Example:
        >>> d = PrecisionDate.parse("2345-6-7", Precision.MONTH)
        >>> d.format()
        '2345-06'
        >>> d.offset(7).format()
        '2346-01'
    """

    model_config = {"frozen": True, "extra": "forbid"}

    instant: CalendarInstant = Field(..., description="Calendar instant, normalized at precision")
    precision: Precision = Field(..., description="Finest meaningful calendar field")

    @model_validator(mode="after")
    def validate_normalized(self) -> "PrecisionDate":
        """Reject instants with information finer than precision."""
        for field in CALENDAR_FIELDS[self.precision + 1 :]:
            value = getattr(self.instant, field.name)
            if value != field.zero_point:
                raise ValueError(
                    f"{field.name} must be {field.zero_point} at {self.precision.name} precision, got {value}"
                )
        return self

    @classmethod
    def at(cls, date: "CalendarInstant | datetime", precision: Precision) -> "PrecisionDate":
        """Truncate date to precision and wrap it."""
        from .core import truncate_to_precision

        return cls(instant=truncate_to_precision(date, precision), precision=Precision(precision))

    @classmethod
    def parse(cls, date_string: str, precision: Precision, *, delimiter: str = "-") -> "PrecisionDate":
        """Parse a ``year-month-day`` string at precision."""
        from .core import parse_at_precision

        return cls(instant=parse_at_precision(date_string, precision, delimiter=delimiter), precision=Precision(precision))

    def format(self, *, delimiter: str = "-") -> str:
        """Render the date segments meaningful at this precision."""
        from .core import format_at_precision

        return format_at_precision(self.instant, self.precision, delimiter=delimiter)

    def offset(self, offset: int) -> "PrecisionDate":
        """Shift by offset units of this precision."""
        from .core import offset_at_precision

        return PrecisionDate.at(offset_at_precision(self.instant, self.precision, offset), self.precision)
