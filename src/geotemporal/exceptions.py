"""Exception hierarchy for geotemporal.

Every error raised on purpose by this package derives from GeotemporalError,
so callers can catch the package's failures without catching unrelated ones.
The concrete errors also inherit the builtin exception that best describes
them (ValueError, KeyError, FileNotFoundError), which keeps ``except
ValueError`` style handlers in calling code working.

Hierarchy:
----------
- GeotemporalError
  - MalformedDateStringError (ValueError)
  - UnknownPrecisionNameError (KeyError)
  - ConfigError
    - ConfigFileNotFoundError (FileNotFoundError)

Example:
--------
>>> from geotemporal.dates import parse_at_precision
>>> from geotemporal.exceptions import MalformedDateStringError
>>> try:
...     parse_at_precision("not-a-date", 2)
... except MalformedDateStringError as e:
...     print(e.context["date_string"])
not-a-date
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "GeotemporalError",
    "MalformedDateStringError",
    "UnknownPrecisionNameError",
    "ConfigError",
    "ConfigFileNotFoundError",
]


class GeotemporalError(Exception):
    """Base exception for geotemporal errors.

    Attributes:
        message: Human-readable description
        context: Values that caused the failure, for logging and debugging
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class MalformedDateStringError(GeotemporalError, ValueError):
    """Date string has no parseable year segment."""

    pass


class UnknownPrecisionNameError(GeotemporalError, KeyError):
    """Resolution name is not one of the known precision names."""

    pass


class ConfigError(GeotemporalError):
    """Configuration could not be loaded."""

    pass


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Configuration file path does not exist."""

    pass
