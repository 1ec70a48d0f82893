"""Timer abstraction for the debouncer.

The debouncer never touches a clock or an event loop directly. It asks a
``Timers`` implementation for the current time and for one-shot callbacks:

- ``AsyncioTimers``: ``loop.call_later`` on the running (or given) loop.
- ``AnyioTimers``: sleeps inside a caller-owned anyio task group, so it
  works on any anyio backend.
- ``ThreadingTimers``: ``threading.Timer`` for code without an event loop.

``wren.testing.ManualTimers`` is a deterministic implementation for tests.

All times are in seconds, matching ``asyncio`` and ``anyio``.
"""

import asyncio
import threading
import time
from collections.abc import Callable
from typing import Protocol, runtime_checkable

import anyio
from anyio.abc import TaskGroup


@runtime_checkable
class TimerHandle(Protocol):
    """A pending one-shot callback that can be cancelled."""

    def cancel(self) -> None: ...


@runtime_checkable
class Timers(Protocol):
    """Source of time and one-shot delayed callbacks."""

    def now(self) -> float: ...
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class AsyncioTimers:
    """Timers backed by an asyncio event loop.

    Without an explicit *loop*, the running loop is looked up on every
    call, so the instance can be created outside of async code.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def now(self) -> float:
        return self._get_loop().time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._get_loop().call_later(delay, callback)


class _ScopeHandle:
    __slots__ = ("_scope",)

    def __init__(self, scope: anyio.CancelScope) -> None:
        self._scope = scope

    def cancel(self) -> None:
        self._scope.cancel()


class AnyioTimers:
    """Timers that sleep inside an anyio task group owned by the caller.

    Usage::

        async with anyio.create_task_group() as tg:
            debounced = Debouncer(validate, 300, timers=AnyioTimers(tg))
            ...

    Must be used from the task group's event loop thread.
    """

    __slots__ = ("_task_group",)

    def __init__(self, task_group: TaskGroup) -> None:
        self._task_group = task_group

    def now(self) -> float:
        return anyio.current_time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        # Created before the task starts so cancel() works even if the
        # task has not been scheduled yet.
        scope = anyio.CancelScope()

        async def fire() -> None:
            with scope:
                await anyio.sleep(delay)
                callback()

        self._task_group.start_soon(fire)
        return _ScopeHandle(scope)


class ThreadingTimers:
    """Timers backed by daemon ``threading.Timer`` threads.

    Callbacks run on the timer thread; the debouncer's own lock keeps its
    state consistent.
    """

    __slots__ = ()

    def now(self) -> float:
        return time.monotonic()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer
