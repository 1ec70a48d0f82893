"""Choice lists for select-like widgets.

A normalised choice list is a list of ``(value, label)`` pairs, where a
label may itself be a list of pairs (an optgroup)::

    normalise_choices(["a", ("b", "Bee"), ("Group", ["c", ("d", "Dee")])])
    # [("a", "a"), ("b", "Bee"), ("Group", [("c", "c"), ("d", "Dee")])]
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeAlias

from wren._internal.props import maybe_call
from wren.errors import ConfigurationError
from wren.log import warning

Choice: TypeAlias = tuple[Any, Any]


def make_choices(items: Iterable[Any], value_prop: str, label_prop: str) -> list[Choice]:
    """Build ``(value, label)`` pairs from objects, calling methods where needed."""
    return [(maybe_call(item, value_prop), maybe_call(item, label_prop)) for item in items]


def normalise_choices(choices: Sequence[Any], *, verbose: bool = False) -> Sequence[Any]:
    """Validate choice input and expand bare values to ``(value, value)`` pairs.

    Args:
        choices: Bare values, ``(value, label)`` pairs, or
            ``(group_label, [choices...])`` optgroups.
        verbose: Log a warning for every bare value that gets expanded,
            in case the expansion was unintended.

    Returns:
        A normalised copy, or *choices* itself when empty.

    Raises:
        ConfigurationError: If a pair does not contain exactly 2 values.
    """
    if not choices:
        return choices

    normalised: list[Choice] = []
    for choice in choices:
        pair = _pair(choice, "Choices in a choice list", verbose=verbose)
        if isinstance(pair[1], (list, tuple)):
            group = [
                _pair(c, "Choices in an optgroup choice list", verbose=verbose) for c in pair[1]
            ]
            normalised.append((pair[0], group))
        else:
            normalised.append(pair)
    return normalised


def _pair(choice: Any, where: str, *, verbose: bool) -> Choice:
    if not isinstance(choice, (list, tuple)):
        warning(f"choice {choice!r} was converted to {(choice, choice)!r}", verbose=verbose)
        return (choice, choice)
    if len(choice) != 2:
        msg = f"{where} must contain exactly 2 values, but got {list(choice)!r}"
        raise ConfigurationError(msg)
    return (choice[0], choice[1])
