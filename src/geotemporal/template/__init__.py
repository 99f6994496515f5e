"""Template string filling.

Fills ``{name}`` placeholders from a dictionary of literal or produced
values, percent-encoding strings and optionally diverting non-string values
into a caller-owned data store.

Example:
    >>> from geotemporal.template import Constant, Producer, fill_template_string
    >>> fill_template_string("/samples/{year}", {"year": Producer(lambda: "2017")})
    '/samples/2017'
"""

from .core import (
    PLACEHOLDER_PATTERN,
    URI_COMPONENT_SAFE,
    encode_uri_component,
    fill_template_string,
    find_placeholders,
)
from .models import Constant, Filler, Fillers, Producer, resolve_filler

__all__ = [
    # Models
    "Constant",
    "Producer",
    "Filler",
    "Fillers",
    "resolve_filler",
    # Filling
    "PLACEHOLDER_PATTERN",
    "URI_COMPONENT_SAFE",
    "encode_uri_component",
    "find_placeholders",
    "fill_template_string",
]
