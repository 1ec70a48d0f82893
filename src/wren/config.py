"""Validation configuration.

ValidationConfig is a frozen dataclass — immutable after creation, passed
explicitly to whatever needs it, no module-level switches.
"""

from dataclasses import dataclass

# Quiet period used by the "auto" policy and by any on-change policy that
# does not name its own delay.
DEFAULT_ON_CHANGE_DELAY_MS = 369


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Validation scheduling configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidationConfig(default_on_change_delay_ms=250, verbose=True)
    """

    # Debounce
    default_on_change_delay_ms: int = DEFAULT_ON_CHANGE_DELAY_MS
    immediate: bool = False  # Leading-edge firing for on-change validation

    # Developer warnings (auto-converted choices, superseded attempts)
    verbose: bool = False
