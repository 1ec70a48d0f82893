"""Validation snapshots — one immutable capture of input data per pass.

A coordinated validation pass captures the current values of every input
exactly once and hands the same ``ValidationSnapshot`` to every target, so
all targets validate against identical data even if widgets change
afterwards.

``capture()`` accepts any of:

- an existing ``ValidationSnapshot`` (returned as-is)
- an ``InputSource`` — anything with ``field_values()`` yielding
  ``(name, value)`` pairs
- a ``MultiValueMapping`` (parsed request form data, query params), read
  with ``get_list`` so repeated keys keep every value
- a ``Mapping`` of name to a string, a sequence of strings, or ``None``
- a form — anything with an ``elements`` sequence of ``Widget`` objects

``None`` values contribute nothing. Repeated names accumulate in order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol, TypeAlias, runtime_checkable

from wren._internal.multimap import MultiValueMapping
from wren.errors import InputError
from wren.widgets import form_data

FieldValue: TypeAlias = str | Sequence[str] | None


@runtime_checkable
class InputSource(Protocol):
    """Anything that can report the submittable value(s) of each named field."""

    def field_values(self) -> Iterable[tuple[str, FieldValue]]: ...


class ValidationSnapshot(Mapping[str, str]):
    """Immutable field data captured for one validation pass.

    Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    ``value`` returns the submitted shape: a string for a single value,
    a list for several.

    Usage::

        snapshot = capture(form)
        username = snapshot["username"]
        tags = snapshot.get_list("tags")
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Mapping[str, Sequence[str]] | None = None) -> None:
        frozen = {name: tuple(values) for name, values in (data or {}).items() if values}
        object.__setattr__(self, "_data", frozen)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, FieldValue]]) -> ValidationSnapshot:
        """Merge ``(name, value)`` pairs, skipping ``None`` and accumulating repeats.

        A name only appears once it has at least one value, so an empty
        multi-select contributes nothing.

        Raises:
            InputError: If a value is neither a string nor a sequence of them.
        """
        data: dict[str, list[str]] = {}
        for name, value in pairs:
            if value is None:
                continue
            if isinstance(value, str):
                values = [value]
            elif isinstance(value, (bytes, bytearray)) or not isinstance(value, Iterable):
                msg = f"Field {name!r} must be a string or a sequence of strings, got {value!r}"
                raise InputError(msg)
            else:
                values = [str(v) for v in value]
            if values:
                data.setdefault(name, []).extend(values)
        return cls(data)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        # Every value counts, not just the first one per key
        if isinstance(other, ValidationSnapshot):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.value(k)!r}" for k in self)
        return f"ValidationSnapshot({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (checkboxes, multi-selects)."""
        return list(self._data.get(key, ()))

    def value(self, key: str) -> str | list[str] | None:
        """Return *key*'s value(s) as submitted: a string, a list, or ``None``."""
        values = self._data.get(key)
        if values is None:
            return None
        if len(values) == 1:
            return values[0]
        return list(values)

    def to_dict(self) -> dict[str, str | list[str]]:
        """Plain-dict copy in submitted shape, e.g. for re-populating a form."""
        return {k: list(v) if len(v) != 1 else v[0] for k, v in self._data.items()}


def capture(source: Any) -> ValidationSnapshot:
    """Capture a ``ValidationSnapshot`` from a data source.

    Raises:
        InputError: If *source* is missing or not a supported source type.
    """
    if source is None:
        msg = f"Cannot capture validation data from source={source!r}"
        raise InputError(msg)
    if isinstance(source, ValidationSnapshot):
        return source
    if isinstance(source, InputSource):
        return ValidationSnapshot.from_pairs(source.field_values())
    if isinstance(source, MultiValueMapping):
        return ValidationSnapshot.from_pairs((name, source.get_list(name)) for name in source)
    if isinstance(source, Mapping):
        return ValidationSnapshot.from_pairs(source.items())
    if getattr(source, "elements", None) is not None:
        return form_data(source)
    msg = f"Cannot capture validation data from {type(source).__name__}: {source!r}"
    raise InputError(msg)
