"""Text helpers for labels, messages, and widget ids."""

import re
from collections.abc import Mapping
from typing import Any

from wren.errors import ConfigurationError

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\}")
_CAPS_RE = re.compile(r"([A-Z]+)")
_SPLIT_RE = re.compile(r"[ _]+")
_ALL_CAPS_RE = re.compile(r"^[A-Z][A-Z0-9]+$")


def format_to_array(template: str, obj: Mapping[str, Any], *, strip: bool = True) -> list[Any]:
    """Replace ``{placeholders}`` with values from *obj*, returning a list.

    Values are interpolated as-is (not stringified), so a placeholder can
    stand for a rendered element. Unknown placeholders stay as literal
    ``{name}`` text.

    Args:
        template: Text with ``{word}`` placeholders.
        obj: Replacement values by placeholder name.
        strip: Drop empty strings from the result.

    Example::

        format_to_array("{count} errors in {field}", {"count": 2, "field": "Name"})
        # [2, " errors in ", "Name"]
    """
    parts: list[Any] = _PLACEHOLDER_RE.split(template)
    for i in range(1, len(parts), 2):
        key = parts[i]
        parts[i] = obj[key] if key in obj else "{" + key + "}"
    if strip:
        parts = [p for p in parts if p != ""]
    return parts


def pretty_name(name: str) -> str:
    """``firstName`` / ``first_name`` → ``First name``; ``SHOUTING_LIKE_THIS`` stays loud."""
    parts = _SPLIT_RE.split(_CAPS_RE.sub(r" \1", name))
    # Leading capital leaves an empty first part
    if parts and parts[0] == "":
        parts = parts[1:]
    for i, part in enumerate(parts):
        if i == 0:
            parts[0] = part[:1].upper() + part[1:]
        elif not _ALL_CAPS_RE.match(part):
            parts[i] = part[:1].lower() + part[1:]
    return " ".join(parts)


def strip(value: Any) -> str:
    """Coerce to ``str`` and trim leading and trailing whitespace."""
    return str(value).strip()


def check_auto_id(auto_id: Any) -> None:
    """Ensure *auto_id* is falsy or a string containing a ``{name}`` placeholder.

    Raises:
        ConfigurationError: For any other value.
    """
    if auto_id and not (isinstance(auto_id, str) and "{name}" in auto_id):
        msg = f"Invalid auto_id {auto_id!r}: must be falsy or a string containing a {{name}} placeholder"
        raise ConfigurationError(msg)
