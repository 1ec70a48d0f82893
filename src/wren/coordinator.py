"""Coordinated validation — one snapshot, many targets, one verdict.

Usage::

    from wren.coordinator import validate_all

    def on_submit(form_widgets):
        if validate_all(form_widgets, [signup_form, address_formset]):
            save(...)

Every target sees the same ``ValidationSnapshot`` and every target runs,
even after one has failed, so all error displays refresh together. A
target that *raises* is different from one that reports failure: the pass
is aborted and the error propagates as ``TargetError``.
"""

import logging
from collections.abc import Awaitable, Iterable
from typing import Any, Protocol, runtime_checkable

from wren._internal.invoke import invoke
from wren.errors import TargetError
from wren.snapshot import ValidationSnapshot, capture

logger = logging.getLogger("wren")


@runtime_checkable
class ValidationTarget(Protocol):
    """An independent unit (field, form, formset) that validates a snapshot.

    ``set_form_data`` returns pass/fail and updates the target's own error
    state as a side effect.
    """

    def set_form_data(self, data: ValidationSnapshot) -> bool | Awaitable[bool]: ...


def validate_all(source: Any, targets: Iterable[ValidationTarget]) -> bool:
    """Validate one captured snapshot against every target.

    Args:
        source: Anything ``capture()`` accepts (a form, a mapping, an
            ``InputSource``, or an existing snapshot).
        targets: Targets to run, in order. No short-circuiting.

    Returns:
        True only if every target reported success. An empty target list
        is valid.

    Raises:
        InputError: If no snapshot can be captured from *source*.
        TargetError: If a target raises; remaining targets are skipped.
    """
    snapshot = capture(source)
    is_valid = True
    count = 0
    for index, target in enumerate(targets):
        count += 1
        try:
            passed = target.set_form_data(snapshot)
        except Exception as exc:
            raise TargetError(index, target) from exc
        if not passed:
            is_valid = False
    logger.debug("validate_all: %d target(s), %d field(s), valid=%s", count, len(snapshot), is_valid)
    return is_valid


async def validate_all_async(source: Any, targets: Iterable[ValidationTarget]) -> bool:
    """Like ``validate_all`` but awaits targets whose ``set_form_data`` is async.

    Targets still run one at a time, in list order, against one snapshot.
    """
    snapshot = capture(source)
    is_valid = True
    count = 0
    for index, target in enumerate(targets):
        count += 1
        try:
            passed = await invoke(target.set_form_data, snapshot)
        except Exception as exc:
            raise TargetError(index, target) from exc
        if not passed:
            is_valid = False
    logger.debug(
        "validate_all_async: %d target(s), %d field(s), valid=%s", count, len(snapshot), is_valid
    )
    return is_valid
