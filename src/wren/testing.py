"""Test utilities for code built on wren.

``ManualTimers`` is a ``Timers`` implementation driven by hand, so
debounce behaviour can be asserted without sleeping::

    from wren.testing import ManualTimers

    timers = ManualTimers()
    debounced = Debouncer(calls.append, 100, timers=timers)
    debounced("a")
    timers.advance(0.1)
    assert calls == ["a"]
"""

from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = ["ManualTimers"]


@dataclass(slots=True)
class _ManualHandle:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimers:
    """A virtual clock. Time only moves when ``advance()`` is called.

    Callbacks due within the advanced window run in due-time order
    (ties in scheduling order), including callbacks they schedule.
    """

    __slots__ = ("_now", "_pending", "_seq")

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._pending: list[_ManualHandle] = []
        self._seq = 0

    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualHandle:
        self._seq += 1
        handle = _ManualHandle(due=self._now + delay, seq=self._seq, callback=callback)
        self._pending.append(handle)
        return handle

    @property
    def pending(self) -> int:
        """Number of callbacks armed and not cancelled."""
        return sum(1 for h in self._pending if not h.cancelled)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that comes due."""
        target = self._now + seconds
        while True:
            live = [h for h in self._pending if not h.cancelled and h.due <= target]
            if not live:
                break
            handle = min(live, key=lambda h: (h.due, h.seq))
            self._pending.remove(handle)
            self._now = max(self._now, handle.due)
            handle.callback()
        self._now = target
        self._pending = [h for h in self._pending if not h.cancelled]
