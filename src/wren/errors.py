"""Wren exception hierarchy.

Shared across policy normalization, scheduling, and the coordinator so
every module raises and catches the same types.

Stale-result suppression is deliberately absent from this module: a
cancelled invocation completes silently and never raises.
"""

from typing import Any


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when validation configuration is malformed.

    Covers unknown policy shapes, wrongly-sized choice pairs, invalid
    ``auto_id`` formats, and non-callable operations handed to the
    scheduling primitives. Raised synchronously at configuration time and
    never retried.
    """


class InputError(WrenError):
    """Raised when a validation snapshot cannot be captured from a source."""


class TargetError(WrenError):
    """A validatable target raised during its own validation step.

    Aborts the rest of the coordinated pass. The original exception is
    chained as ``__cause__``.

    Attributes:
        index: Position of the failing target in the target list.
        target: The target that raised.
    """

    def __init__(self, index: int, target: Any) -> None:
        self.index = index
        self.target = target
        super().__init__(f"Validation target {index} ({type(target).__name__}) raised")
