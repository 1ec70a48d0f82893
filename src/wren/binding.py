"""Field binding — policy lookup, debouncing, and stale-result suppression.

``FieldBinding`` wires the scheduling primitives together for one field::

    UI event ─► policy lookup ─► Debouncer (on-change only) ─► attempt
                                                               │
                                  previous attempt.cancel() ◄──┘

Each attempt calls ``validate(value, done)`` where ``done`` is a fresh
``Cancellable`` wrapping ``on_result``. Starting a new attempt cancels the
previous ``done``, so a slow attempt that completes late is dropped rather
than overwriting newer state.

Example::

    binding = FieldBinding(
        "username",
        "auto",
        validate=check_username_available,   # calls done(errors) later
        on_result=show_errors,
        timers=AnyioTimers(task_group),
    )
    binding.handle_event("change", "ali")
    binding.handle_event("change", "alice")  # one check, for "alice"
    binding.handle_event("blur", "alice")    # validates immediately
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from wren.cancellable import Cancellable
from wren.config import ValidationConfig
from wren.debounce import Debouncer
from wren.errors import ConfigurationError
from wren.log import info
from wren.policy import ON_CHANGE, ValidationPolicy, normalise_event_name, normalise_validation
from wren.timers import Timers

logger = logging.getLogger("wren")


class FieldBinding:
    """Schedules validation attempts for one field according to its policy.

    Args:
        name: Field name (used in log messages).
        validation: Raw policy configuration or a ``ValidationPolicy``.
        validate: ``validate(value, done)`` starts one attempt and calls
            ``done(result)`` when finished — synchronously or later.
        on_result: Applies a finished attempt's result.
        config: Scheduling defaults.
        timers: Time source for the on-change debouncer.

    Raises:
        ConfigurationError: If the policy is malformed or *validate* /
            *on_result* are not callable.
    """

    __slots__ = (
        "_config",
        "_current",
        "_debouncer",
        "_lock",
        "_on_result",
        "_validate",
        "name",
        "policy",
    )

    def __init__(
        self,
        name: str,
        validation: Any,
        validate: Callable[[Any, Cancellable], Any],
        on_result: Callable[[Any], Any],
        *,
        config: ValidationConfig | None = None,
        timers: Timers | None = None,
    ) -> None:
        if not callable(validate):
            msg = f"Field {name!r}: validate must be callable, got {validate!r}"
            raise ConfigurationError(msg)
        if not callable(on_result):
            msg = f"Field {name!r}: on_result must be callable, got {on_result!r}"
            raise ConfigurationError(msg)
        self.name = name
        self.policy: ValidationPolicy = normalise_validation(validation)
        self._config = config or ValidationConfig()
        self._validate = validate
        self._on_result = on_result
        self._lock = threading.Lock()
        self._current: Cancellable | None = None
        self._debouncer: Debouncer | None = None
        if self.policy.on_change_enabled:
            self._debouncer = Debouncer(
                self._start,
                self.policy.effective_delay_ms(self._config.default_on_change_delay_ms),
                immediate=self._config.immediate,
                timers=timers,
            )

    @property
    def debouncer(self) -> Debouncer | None:
        """The field's on-change debouncer, if its policy validates on change."""
        return self._debouncer

    @property
    def current(self) -> Cancellable | None:
        """Completion handle of the most recent attempt."""
        return self._current

    def handle_event(self, event: str, value: Any) -> bool:
        """React to a UI event. Returns True if it scheduled or ran an attempt."""
        if self.policy.is_manual:
            return False
        name = normalise_event_name(event)
        if name == ON_CHANGE:
            if self._debouncer is None:
                return False
            self._debouncer.schedule(value)
            return True
        if name in self.policy.trigger_events:
            self.validate_now(value)
            return True
        return False

    def validate_now(self, value: Any) -> Cancellable:
        """Run an attempt right away, superseding any pending or in-flight one."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        return self._start(value)

    def cancel(self) -> None:
        """Drop the pending debounce and suppress the in-flight attempt's result."""
        if self._debouncer is not None:
            self._debouncer.cancel()
        with self._lock:
            current, self._current = self._current, None
        if current is not None:
            current.cancel()

    def _start(self, value: Any) -> Cancellable:
        done = Cancellable(self._on_result)
        with self._lock:
            previous, self._current = self._current, done
        if previous is not None and not previous.cancelled:
            previous.cancel()
            info(f"superseded previous validation attempt for {self.name!r}", verbose=self._config.verbose)
        logger.debug("validating field %r", self.name)
        self._validate(value, done)
        return done

    def __repr__(self) -> str:
        return f"FieldBinding({self.name!r}, mode={self.policy.mode.value})"
