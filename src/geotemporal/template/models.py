"""Filler value types for template strings.

A filler dictionary maps placeholder names to the value substituted for
``{name}``. Values can be tagged explicitly:

- Constant: a literal value, used as-is even when it is callable.
- Producer: a zero-argument function, called each time the placeholder is
  filled.

Untagged values are also accepted: callables act as producers and anything
else as a literal.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

__all__ = ["Constant", "Producer", "Filler", "Fillers", "resolve_filler"]


@dataclass(frozen=True)
class Constant:
    """Literal filler value."""

    value: Any


@dataclass(frozen=True)
class Producer:
    """Filler computed on demand by a zero-argument function."""

    func: Callable[[], Any]

    def __call__(self) -> Any:
        return self.func()


Filler = Union[Constant, Producer, Any]
Fillers = Mapping[str, Filler]


def resolve_filler(filler: Filler) -> Any:
    """Return the value a filler stands for, calling producers."""
    if isinstance(filler, Constant):
        return filler.value
    if isinstance(filler, Producer):
        return filler()
    if callable(filler):
        return filler()
    return filler
