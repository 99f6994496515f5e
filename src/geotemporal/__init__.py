"""geotemporal: precision-aware dates and template filling.

Package Structure:
-----------------
- exceptions: Exception hierarchy (GeotemporalError and subclasses)
- precision: Precision levels and resolution names
- dates: CalendarInstant / PrecisionDate models and date operations
- template: Placeholder filling for request paths and URLs
- utils: Value coercion helpers and logging setup
- geojson: GeoJSON wrappers
- config: TOML + environment settings
- cli: Typer command-line interface

Example:
--------
>>> from geotemporal import Precision, parse_at_precision, format_at_precision
>>> format_at_precision(parse_at_precision("2345-6", Precision.DAY), Precision.DAY)
'2345-06-01'
"""

from .dates import (
    CalendarInstant,
    PrecisionDate,
    clamp_to_range,
    format_at_precision,
    format_range_at_precision,
    offset_at_precision,
    parse_at_precision,
    truncate_to_precision,
)
from .exceptions import GeotemporalError, MalformedDateStringError, UnknownPrecisionNameError
from .geojson import build_feature_collection
from .precision import ALL_FIELDS, ALL_RESOLUTION_NAMES, RESOLUTION_TO_PRECISION, Precision, get_precision_by_resolution
from .template import Constant, Producer, fill_template_string, find_placeholders
from .utils import clamp_integer, coerce_number, coerce_strings_to_numbers, deep_difference

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "GeotemporalError",
    "MalformedDateStringError",
    "UnknownPrecisionNameError",
    # Precision
    "Precision",
    "ALL_FIELDS",
    "ALL_RESOLUTION_NAMES",
    "RESOLUTION_TO_PRECISION",
    "get_precision_by_resolution",
    # Dates
    "CalendarInstant",
    "PrecisionDate",
    "truncate_to_precision",
    "offset_at_precision",
    "format_at_precision",
    "parse_at_precision",
    "format_range_at_precision",
    "clamp_to_range",
    # Template
    "Constant",
    "Producer",
    "fill_template_string",
    "find_placeholders",
    # Values
    "coerce_number",
    "clamp_integer",
    "deep_difference",
    "coerce_strings_to_numbers",
    # GeoJSON
    "build_feature_collection",
]
