"""Attribute helper for building choices from objects."""

from collections.abc import Mapping
from typing import Any


def maybe_call(obj: Any, prop: str) -> Any:
    """Read *prop* from *obj*, calling it if it's a method or other callable."""
    value = obj[prop] if isinstance(obj, Mapping) else getattr(obj, prop)
    if callable(value):
        value = value()
    return value
