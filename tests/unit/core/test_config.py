"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import BaroConfig, parse_log_level
from core.errors import BaroConfigError


def test_from_env_defaults_to_warning() -> None:
    """Config should default to the warning log level."""
    config = BaroConfig.from_env()

    assert config.log_level == "warning"


def test_from_env_reads_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should normalize the log level from environment."""
    monkeypatch.setenv("BAROTOOL_LOG_LEVEL", " INFO ")

    config = BaroConfig.from_env()

    assert config.log_level == "info"


def test_from_env_raises_for_invalid_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for unknown level names."""
    monkeypatch.setenv("BAROTOOL_LOG_LEVEL", "loud")

    with pytest.raises(BaroConfigError, match="BAROTOOL_LOG_LEVEL"):
        BaroConfig.from_env()


def test_parse_log_level_names_source_in_error() -> None:
    """Errors should name where the bad value came from."""
    with pytest.raises(BaroConfigError, match="--log-level"):
        parse_log_level("verbose", "--log-level")
