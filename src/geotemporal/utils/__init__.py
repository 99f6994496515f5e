"""Foundation utilities module for geotemporal.

Provides leaf helpers for loose value handling (numeric coercion, integer
clamping, deep difference, recursive string-to-number conversion) and logging
setup. As a Layer 0 foundation module, this package must not import any other
project packages.

The value helpers accept the loosely typed data that arrives from request
parameters and JSON payloads, and never raise for odd input: unparseable
values fall back to a caller-provided default instead.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
import math
import re
from typing import Any

__all__ = [
    "coerce_number",
    "parse_int_prefix",
    "clamp_integer",
    "deep_difference",
    "coerce_strings_to_numbers",
    "configure_logging",
]

_INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)

# Marks a key absent from the base mapping, so that None still compares as a value.
_MISSING = object()


# ============================================================================
# Numeric Coercion
# ============================================================================


def coerce_number(value: Any, fallback: Any = None) -> Any:
    """Return value if it is a finite number, else fallback.

    Booleans are not treated as numbers.

    Args:
        value: Candidate value
        fallback: Returned when value is not a finite int or float

    Returns:
        value unchanged, or fallback
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback

    if isinstance(value, float) and not math.isfinite(value):
        return fallback

    return value


def parse_int_prefix(text: Any) -> int | None:
    """Parse the leading base-10 integer of a string.

    Leading whitespace and a sign are accepted; anything after the digits is
    ignored ("12px" -> 12). Returns None when no digits lead the string.

    Args:
        text: String to parse (non-strings return None)

    Returns:
        Parsed integer or None
    """
    if not isinstance(text, str):
        return None

    match = _INT_PREFIX_PATTERN.match(text)
    if match is None:
        return None

    return int(match.group(1))


def clamp_integer(value: Any, minimum: int, maximum: int) -> int:
    """Parse value as a base-10 integer and clamp it into [minimum, maximum].

    Floats are truncated toward zero. Unparseable input is treated as minimum.

    Args:
        value: Raw value (int, float, or string such as a query parameter)
        minimum: Lower bound, inclusive
        maximum: Upper bound, inclusive

    Returns:
        Clamped integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        parsed: int | None = value
    elif isinstance(value, float):
        parsed = int(value) if math.isfinite(value) else None
    else:
        parsed = parse_int_prefix(str(value))

    if parsed is None:
        parsed = minimum

    parsed = max(minimum, parsed)
    return min(parsed, maximum)


# ============================================================================
# Structural Helpers
# ============================================================================


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list))


def _items(value: Mapping | list):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _lookup(container: Any, key: Any) -> Any:
    if isinstance(container, Mapping):
        return container.get(key, _MISSING)
    if isinstance(container, list) and isinstance(key, int) and 0 <= key < len(container):
        return container[key]
    return _MISSING


def _deep_equal(left: Any, right: Any) -> bool:
    """Structural equality that keeps booleans apart from numbers (True != 1)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return left.keys() == right.keys() and all(_deep_equal(left[key], right[key]) for key in left)

    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(_deep_equal(a, b) for a, b in zip(left, right))

    if _is_container(left) or _is_container(right):
        return False

    return left == right


def deep_difference(obj: Mapping | list, base: Any) -> dict[Any, Any]:
    """Return the parts of obj that differ from base.

    Keys equal (by deep equality) on both sides are omitted; booleans never
    equal numbers, so True differs from 1. Where both sides
    hold a mapping or list under the same key, only the differing sub-keys are
    reported; any other differing key reports obj's full value. List entries
    are keyed by index.

    Args:
        obj: Mapping (or list) to inspect
        base: Reference structure

    Returns:
        Dictionary holding only the differences

    Example:
        >>> deep_difference({"a": 1, "b": {"c": 2, "d": 3}}, {"a": 1, "b": {"c": 2, "d": 4}})
        {'b': {'d': 3}}
    """
    result: dict[Any, Any] = {}

    for key, value in _items(obj):
        base_value = _lookup(base, key)
        if base_value is not _MISSING and _deep_equal(value, base_value):
            continue

        if _is_container(value) and _is_container(base_value):
            result[key] = deep_difference(value, base_value)
        else:
            result[key] = value

    return result


def _identity(value: Any) -> Any:
    return value


def coerce_strings_to_numbers(value: Any, post_process: Callable[[Any], Any] = _identity) -> Any:
    """Recursively convert fully numeric strings to floats.

    Lists and mappings are walked (mappings come back as plain dicts); other
    values pass through. post_process is applied to the result at every level
    of the recursion, the top level included.

    Args:
        value: Value or nested structure to convert
        post_process: Hook called on each converted node

    Returns:
        Converted value, as returned by post_process
    """
    final_value = value

    if isinstance(value, str):
        if _DECIMAL_PATTERN.match(value):
            final_value = float(value)
    elif isinstance(value, list):
        final_value = [coerce_strings_to_numbers(item, post_process) for item in value]
    elif isinstance(value, Mapping):
        final_value = {key: coerce_strings_to_numbers(item, post_process) for key, item in value.items()}

    return post_process(final_value)


# ============================================================================
# Logging Configuration
# ============================================================================


def configure_logging(level: str = "INFO", structured: bool = False) -> None:
    """Configure root logger with standardized format.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Emit one JSON-style object per line

    Raises:
        ValueError: If level is not a known logging level
    """
    numeric_level = getattr(logging, level.upper(), None)

    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)

    if structured:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"name": "%(name)s", "message": "%(message)s"}'
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
