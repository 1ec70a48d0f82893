"""Tests for wren.config — ValidationConfig frozen dataclass."""

import pytest

from wren.config import DEFAULT_ON_CHANGE_DELAY_MS, ValidationConfig


class TestValidationConfig:
    def test_defaults(self) -> None:
        cfg = ValidationConfig()

        assert cfg.default_on_change_delay_ms == DEFAULT_ON_CHANGE_DELAY_MS == 369
        assert cfg.immediate is False
        assert cfg.verbose is False

    def test_override(self) -> None:
        cfg = ValidationConfig(default_on_change_delay_ms=100, immediate=True, verbose=True)

        assert cfg.default_on_change_delay_ms == 100
        assert cfg.immediate is True
        assert cfg.verbose is True

    def test_frozen(self) -> None:
        cfg = ValidationConfig()

        with pytest.raises(AttributeError):
            cfg.verbose = True  # type: ignore[misc]
