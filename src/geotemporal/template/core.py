"""Placeholder filling for request path and URL templates.

Templates contain ``{name}`` tokens, where name starts with a letter, ``-``
or ``_`` and continues with letters, digits, ``-`` or ``_`` (any case). Each
token is replaced according to the type of the value its filler yields:

- no filler for the name, or a None value: empty string
- str: percent-encoded (encodeURIComponent rules, UTF-8)
- anything else with a data store: empty string, and the raw value is
  written to data_store[name]
- anything else without a data store: str(value)

Every token is located in the original template and replaced in place, so a
substituted value can never create or consume another token.

Example:
    >>> fill_template_string("/api/{name}", {"name": "a b"})
    '/api/a%20b'
    >>> store = {}
    >>> fill_template_string("/q/{filter}", {"filter": lambda: {"a": 1}}, store)
    '/q/'
    >>> store
    {'filter': {'a': 1}}
"""

from __future__ import annotations

from collections.abc import MutableMapping
import logging
import re
from typing import Any, Optional
from urllib.parse import quote

from .models import Fillers, resolve_filler

__all__ = [
    "PLACEHOLDER_PATTERN",
    "URI_COMPONENT_SAFE",
    "encode_uri_component",
    "find_placeholders",
    "fill_template_string",
]

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{([a-z_-][a-z0-9_-]*)\}", re.IGNORECASE | re.ASCII)

# Characters encodeURIComponent leaves alone, besides ASCII letters and digits.
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a string for use inside a URL component."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def find_placeholders(template: Optional[str]) -> list[str]:
    """Names of all placeholders in template, in order, duplicates included."""
    if not template:
        return []
    return PLACEHOLDER_PATTERN.findall(template)


def _render(name: str, fillers: Fillers, data_store: Optional[MutableMapping[str, Any]]) -> str:
    if name not in fillers:
        logger.debug("No filler for placeholder {%s}; substituting empty string", name)
        return ""

    value = resolve_filler(fillers[name])

    if value is None:
        return ""

    if isinstance(value, str):
        return encode_uri_component(value)

    if data_store is not None:
        data_store[name] = value
        return ""

    return str(value)


def fill_template_string(
    template: Optional[str],
    fillers: Fillers,
    data_store: Optional[MutableMapping[str, Any]] = None,
) -> Optional[str]:
    """Return template with its placeholders filled.

    Args:
        template: String containing ``{name}`` placeholders
        fillers: Placeholder name -> Constant, Producer, callable, or literal
        data_store: Optional caller-owned mapping that receives non-string
            values instead of inlining them. Only written to, never read or
            cleared; an empty mapping counts as supplied.

    Returns:
        Filled string; an empty or None template is returned unchanged
    """
    if not template:
        return template

    return PLACEHOLDER_PATTERN.sub(lambda match: _render(match.group(1), fillers, data_store), template)
