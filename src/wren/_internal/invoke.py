"""Invoke helpers — call sync or async targets uniformly.

Validation targets can implement ``set_form_data`` as ``def`` or
``async def``. Any code that calls a user-provided target must handle
both cases. This module provides a single helper so the sync/async check
lives in exactly one place.

Usage::

    from wren._internal.invoke import invoke

    is_valid = await invoke(target.set_form_data, snapshot)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable."""
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
