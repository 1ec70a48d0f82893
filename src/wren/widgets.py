"""Input widgets — reading submittable values out of form controls.

``Widget`` describes one input control the way a browser form element
exposes it (``name``, ``type``, ``value``, ``checked``, options). The
helpers here turn widgets into the values a form submission would carry:

- text-like inputs submit their ``value``
- checkboxes and radios submit their ``value`` only while checked
- ``select-one`` submits the selected option's value
- ``select-multiple`` submits a list of selected values
- anything else (buttons, submits, resets) submits nothing
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wren.errors import InputError

if TYPE_CHECKING:
    from wren.snapshot import ValidationSnapshot

TEXT_INPUT_TYPES = frozenset(
    {"hidden", "password", "text", "email", "url", "number", "file", "textarea"}
)
CHECKED_INPUT_TYPES = frozenset({"checkbox", "radio"})


@dataclass(frozen=True, slots=True)
class Option:
    """One ``<option>`` of a select widget."""

    value: str
    selected: bool = False
    label: str = ""


@dataclass(frozen=True, slots=True)
class Widget:
    """A single input control.

    ``selected_index`` is only meaningful for ``select-one`` widgets.
    """

    name: str
    type: str = "text"
    value: str = ""
    checked: bool = False
    options: tuple[Option, ...] = ()
    selected_index: int = 0


@dataclass(frozen=True, slots=True)
class Form:
    """An ordered collection of widgets, as a rendered ``<form>`` holds them."""

    elements: tuple[Widget, ...] = ()


def widget_value(widget: Widget) -> str | list[str] | None:
    """Return the widget's submittable value(s), or ``None`` if it submits nothing.

    An unchecked checkbox or radio submits nothing and is left out of any
    snapshot built from its form.
    """
    kind = widget.type
    if kind in TEXT_INPUT_TYPES:
        return widget.value
    if kind in CHECKED_INPUT_TYPES:
        if widget.checked:
            return widget.value
        return None
    if kind == "select-one":
        if 0 <= widget.selected_index < len(widget.options):
            return widget.options[widget.selected_index].value
        return None
    if kind == "select-multiple":
        return [option.value for option in widget.options if option.selected]
    return None


def form_data(form: Any) -> ValidationSnapshot:
    """Capture the submittable value(s) held in each of a form's widgets.

    Raises:
        InputError: If *form* is missing.
    """
    from wren.snapshot import ValidationSnapshot

    if not form:
        msg = f"form_data was given form={form!r}"
        raise InputError(msg)
    return ValidationSnapshot.from_pairs((w.name, widget_value(w)) for w in form.elements)


def field_data(form: Any, name: str) -> str | list[str] | None:
    """Return one named field's submittable value(s) in submitted shape.

    Several widgets sharing a name (a checkbox group, say) merge into a
    list. Returns ``None`` when nothing with that name submits a value.

    Raises:
        InputError: If *form* is missing.
    """
    if not form:
        msg = f"field_data was given form={form!r}"
        raise InputError(msg)
    data: str | list[str] | None = None
    for widget in _named(form.elements, name):
        value = widget_value(widget)
        if value is None:
            continue
        if data is None:
            data = value
        elif isinstance(data, list):
            data = data + (value if isinstance(value, list) else [value])
        else:
            data = [data, *(value if isinstance(value, list) else [value])]
    return data


def _named(elements: Sequence[Widget], name: str) -> list[Widget]:
    return [w for w in elements if w.name == name]
