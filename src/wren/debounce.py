"""Debouncing — collapse a burst of calls into one, using the latest arguments.

``Debouncer`` wraps an operation so it only fires after calls stop
arriving for a full quiet period::

    debounced = Debouncer(validate_field, 369)
    debounced("a")
    debounced("ab")
    debounced("abc")   # validate_field("abc") runs once, 369 ms later

Escape hatches:

- ``cancel()`` drops a pending firing without invoking the operation.
- ``trigger_now()`` cancels the pending firing and invokes the operation
  immediately with the most recent arguments.

State lives on the handle rather than in closure variables, so it can be
inspected (``state``, ``pending``, ``last_args``) and tested.

Free-threading safety:
    - Timer reference, arguments, and state are guarded by one Lock per
      handle (handles are never shared between fields, so no global lock)
    - The wrapped operation is always invoked outside the lock
"""

import threading
from collections.abc import Callable
from functools import partial
from enum import Enum
from typing import Any

from wren.errors import ConfigurationError
from wren.timers import AsyncioTimers, TimerHandle, Timers

# Clock jitter below this is treated as a full quiet period (seconds).
_RESOLUTION = 1e-6


class DebounceState(Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    FIRED = "fired"
    CANCELLED = "cancelled"


class Debouncer:
    """Trailing-edge (or leading-edge with ``immediate=True``) debouncer.

    At most one underlying timer is pending at a time. When it fires early
    because calls kept arriving, it re-arms itself for the remainder of the
    quiet period instead of stacking new timers.

    Args:
        func: The operation to debounce.
        wait_ms: Quiet period in milliseconds.
        immediate: Fire on the leading edge of a burst and suppress the
            trailing call.
        timers: Time source; defaults to ``AsyncioTimers()``.

    Raises:
        ConfigurationError: If *func* is not callable or *wait_ms* is negative.
    """

    __slots__ = (
        "_args",
        "_func",
        "_generation",
        "_immediate",
        "_kwargs",
        "_lock",
        "_result",
        "_scheduled",
        "_state",
        "_timer",
        "_timers",
        "_timestamp",
        "_wait",
    )

    def __init__(
        self,
        func: Callable[..., Any],
        wait_ms: int,
        *,
        immediate: bool = False,
        timers: Timers | None = None,
    ) -> None:
        if not callable(func):
            msg = f"Debouncer needs a callable, got {func!r}"
            raise ConfigurationError(msg)
        if wait_ms < 0:
            msg = f"Debounce wait must be non-negative, got {wait_ms!r}"
            raise ConfigurationError(msg)
        self._func = func
        self._wait = wait_ms / 1000
        self._immediate = immediate
        self._timers = timers or AsyncioTimers()
        self._lock = threading.Lock()
        self._timer: TimerHandle | None = None
        self._generation = 0  # Identifies the live timer; stale firings are ignored
        self._args: tuple[Any, ...] = ()
        self._kwargs: dict[str, Any] = {}
        self._scheduled = False  # True once schedule() has recorded arguments
        self._timestamp = 0.0
        self._result: Any = None
        self._state = DebounceState.IDLE

    @property
    def state(self) -> DebounceState:
        return self._state

    @property
    def pending(self) -> bool:
        """True while a timer is armed."""
        return self._timer is not None

    @property
    def last_args(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        """Arguments captured by the most recent ``schedule()`` call."""
        with self._lock:
            return self._args, dict(self._kwargs)

    def schedule(self, *args: Any, **kwargs: Any) -> Any:
        """Record a call and (re)arm the quiet-period timer.

        Returns the most recent result of the wrapped operation, which in
        ``immediate`` mode is this call's result when it opened a burst.
        """
        with self._lock:
            self._args = args
            self._kwargs = kwargs
            self._scheduled = True
            self._timestamp = self._timers.now()
            call_now = self._immediate and self._timer is None
            if self._timer is None:
                self._timer = self._arm(self._wait)
            self._state = DebounceState.SCHEDULED

        if call_now:
            self._result = self._func(*args, **kwargs)
        return self._result

    __call__ = schedule

    def _arm(self, delay: float) -> TimerHandle:
        self._generation += 1
        return self._timers.call_later(delay, partial(self._later, self._generation))

    def _later(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            elapsed = self._timers.now() - self._timestamp
            if elapsed + _RESOLUTION < self._wait:
                self._timer = self._arm(self._wait - elapsed)
                return
            self._timer = None
            self._state = DebounceState.FIRED
            if self._immediate:
                return
            args, kwargs = self._args, self._kwargs

        self._result = self._func(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending firing, if any. Idempotent."""
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._state = DebounceState.CANCELLED

    def trigger_now(self) -> Any:
        """Cancel any pending firing and invoke the operation right away.

        Uses the most recently scheduled arguments. A no-op returning
        ``None`` if nothing has been scheduled yet.
        """
        with self._lock:
            self._cancel_locked()
            if not self._scheduled:
                return None
            args, kwargs = self._args, self._kwargs
            self._state = DebounceState.FIRED

        self._result = self._func(*args, **kwargs)
        return self._result

    def __repr__(self) -> str:
        return f"Debouncer({self._func!r}, wait_ms={round(self._wait * 1000)}, state={self._state.value})"
