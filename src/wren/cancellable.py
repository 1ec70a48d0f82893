"""Cancellable invocations — let only the latest attempt take effect.

Use case: a field starts a new asynchronous validation while the previous
attempt for the same field is still waiting on its callback. Cancelling
the old handle means its late result is dropped instead of overwriting
newer state::

    done = Cancellable(apply_result)
    start_remote_check(value, done)   # eventually calls done(outcome)
    ...
    done.cancel()                     # a newer attempt superseded this one

Calling a cancelled handle is silently ignored — no error, no effect.
Cancellation is not a failure and surfaces no signal.

If the wrapped callable has an ``on_cancel()`` method (or an explicit
``on_cancel`` is given), it runs exactly once, on the first ``cancel()``.
"""

import threading
from collections.abc import Callable
from typing import Any

from wren.errors import ConfigurationError


class Cancellable:
    """A callable wrapper whose effect can be permanently suppressed.

    The ``cancelled`` flag is monotonic: once set it is never reset.
    """

    __slots__ = ("_cancelled", "_func", "_lock", "_on_cancel")

    def __init__(
        self,
        func: Callable[..., Any],
        *,
        on_cancel: Callable[[], Any] | None = None,
    ) -> None:
        if not callable(func):
            msg = f"Cancellable needs a callable, got {func!r}"
            raise ConfigurationError(msg)
        if on_cancel is None:
            hook = getattr(func, "on_cancel", None)
            on_cancel = hook if callable(hook) else None
        self._func = func
        self._on_cancel = on_cancel
        self._cancelled = False
        self._lock = threading.Lock()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Forward to the wrapped callable unless cancelled."""
        if self._cancelled:
            return None
        return self._func(*args, **kwargs)

    def cancel(self) -> None:
        """Suppress all future calls. Only the first call has any effect."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "live"
        return f"Cancellable({self._func!r}, {state})"
