"""Validation policy — which UI events trigger validation, and how fast.

Raw configuration arrives in several shorthand shapes::

    None / "manual"                 # validate only when asked (e.g. on submit)
    "auto"                          # blur + debounced on-change, 369 ms
    "blur change"                   # whitespace-separated event names
    {"on": ["blur"], "delay": 500}  # structured form, optional delay

``normalise_validation()`` classifies the raw value into a tagged union
(``Absent | Literal | EventString | EventList | PolicyObject``) and then
matches exhaustively over it to produce one canonical, immutable
``ValidationPolicy``. Normalization only classifies — debouncing is the
caller's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from wren.config import DEFAULT_ON_CHANGE_DELAY_MS
from wren.errors import ConfigurationError

# The synthetic "value changed" event. Never stored in trigger_events.
ON_CHANGE = "onChange"

# Keys accepted for the delay of a structured policy, in lookup order.
_DELAY_KEYS = ("on_change_delay", "onChangeDelay", "delay")


class PolicyMode(Enum):
    MANUAL = "manual"
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class ValidationPolicy:
    """Canonical validation schedule for a field or form.

    ``trigger_events`` holds normalized handler names (``"onBlur"``) with no
    duplicates. Value changes are represented by ``on_change_enabled``;
    ``on_change_delay_ms`` is ``None`` when the configuration left it unset.
    """

    mode: PolicyMode
    trigger_events: tuple[str, ...] = ()
    on_change_enabled: bool = False
    on_change_delay_ms: int | None = None

    @classmethod
    def manual(cls) -> ValidationPolicy:
        return _MANUAL

    @classmethod
    def auto(cls) -> ValidationPolicy:
        return _AUTO

    @property
    def is_manual(self) -> bool:
        return self.mode is PolicyMode.MANUAL

    def effective_delay_ms(self, default: int = DEFAULT_ON_CHANGE_DELAY_MS) -> int:
        """The on-change quiet period, falling back to *default* when unset."""
        if self.on_change_delay_ms is None:
            return default
        return self.on_change_delay_ms

    def triggers(self, event: str) -> bool:
        """True if *event* (raw or normalized) should start a validation attempt."""
        if self.is_manual:
            return False
        name = normalise_event_name(event)
        if name == ON_CHANGE:
            return self.on_change_enabled
        return name in self.trigger_events


_MANUAL = ValidationPolicy(mode=PolicyMode.MANUAL)
_AUTO = ValidationPolicy(
    mode=PolicyMode.AUTO,
    trigger_events=("onBlur",),
    on_change_enabled=True,
    on_change_delay_ms=DEFAULT_ON_CHANGE_DELAY_MS,
)


# ---------------------------------------------------------------------------
# Raw configuration shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Absent:
    """No validation configured."""


@dataclass(frozen=True, slots=True)
class Literal:
    """One of the reserved tokens ``"manual"`` or ``"auto"``."""

    token: str


@dataclass(frozen=True, slots=True)
class EventString:
    """Whitespace-separated event names, e.g. ``"blur change"``."""

    events: str


@dataclass(frozen=True, slots=True)
class EventList:
    """An explicit list of event names (no further splitting)."""

    events: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PolicyObject:
    """Structured configuration: ``on`` plus an optional delay."""

    on: EventString | EventList
    delay_ms: int | None = None


RawPolicy: TypeAlias = Absent | Literal | EventString | EventList | PolicyObject


def classify(raw: Any) -> RawPolicy:
    """Sort raw configuration into one of the ``RawPolicy`` shapes.

    Raises:
        ConfigurationError: If *raw* has none of the accepted shapes.
    """
    # Any falsy non-mapping (None, "", False, 0) means no policy
    if not raw and not isinstance(raw, Mapping):
        return Absent()
    if isinstance(raw, str):
        if raw in ("manual", "auto"):
            return Literal(raw)
        return EventString(raw)
    if isinstance(raw, Mapping):
        return PolicyObject(on=_classify_on(raw.get("on")), delay_ms=_read_delay(raw))
    msg = f"Unexpected validation config: {raw!r}"
    raise ConfigurationError(msg)


def _classify_on(on: Any) -> EventString | EventList:
    if isinstance(on, str):
        return EventString(on)
    if isinstance(on, (list, tuple)):
        for event in on:
            if not isinstance(event, str):
                msg = f"Validation event names must be strings, got {event!r}"
                raise ConfigurationError(msg)
        return EventList(tuple(on))
    msg = f"Validation config mappings must have an 'on' string or list, got {on!r}"
    raise ConfigurationError(msg)


def _read_delay(raw: Mapping[str, Any]) -> int | None:
    for key in _DELAY_KEYS:
        if key in raw:
            delay = raw[key]
            break
    else:
        return None
    if delay is None:
        return None
    # bool is an int subclass but never a meaningful delay
    if isinstance(delay, bool) or not isinstance(delay, int) or delay < 0:
        msg = f"Validation delay must be a non-negative integer (ms), got {delay!r}"
        raise ConfigurationError(msg)
    return delay


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


def normalise_event_name(event: str) -> str:
    """``"blur"`` → ``"onBlur"``; names already starting with ``on`` pass through."""
    if event.startswith("on"):
        return event
    return "on" + event[:1].upper() + event[1:]


def normalise_events(events: Iterable[str]) -> tuple[tuple[str, ...], bool]:
    """Normalize event names and split out the synthetic change event.

    Returns:
        ``(trigger_events, on_change_enabled)``. Duplicates are dropped,
        keeping first occurrence order.
    """
    names = list(dict.fromkeys(normalise_event_name(e) for e in events))
    on_change = ON_CHANGE in names
    if on_change:
        names.remove(ON_CHANGE)
    return tuple(names), on_change


def normalise_validation(raw: Any) -> ValidationPolicy:
    """Turn raw validation configuration into a canonical ``ValidationPolicy``.

    An existing ``ValidationPolicy`` is returned unchanged.

    Raises:
        ConfigurationError: If *raw* is not an accepted shape, a mapping's
            ``on`` is neither a string nor a list, or a delay is invalid.
    """
    if isinstance(raw, ValidationPolicy):
        return raw

    match classify(raw):
        case Absent() | Literal("manual"):
            return ValidationPolicy.manual()
        case Literal("auto"):
            return ValidationPolicy.auto()
        case Literal(token):
            msg = f"Unexpected validation token: {token!r}"
            raise ConfigurationError(msg)
        case EventString() | EventList() as on:
            return _custom(on, None)
        case PolicyObject(on=on, delay_ms=delay_ms):
            return _custom(on, delay_ms)


def _custom(on: EventString | EventList, delay_ms: int | None) -> ValidationPolicy:
    match on:
        case EventString(events=text):
            tokens: Iterable[str] = text.split()
        case EventList(events=items):
            tokens = items
    events, on_change = normalise_events(tokens)
    return ValidationPolicy(
        mode=PolicyMode.CUSTOM,
        trigger_events=events,
        on_change_enabled=on_change,
        on_change_delay_ms=delay_ms,
    )
