"""Runtime configuration model for barotool.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import BaroConfigError


@dataclass(frozen=True)
class BaroConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events on stderr.
    """

    log_level: str

    @classmethod
    def from_env(cls) -> "BaroConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BaroConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=parse_log_level(log_level_value, LOG_LEVEL_ENV_VAR))


def parse_log_level(raw_value: str, source_name: str) -> str:
    """Parse and validate a log level name.

    Args:
        raw_value: Raw level text.
        source_name: Where the value came from, for error messages.

    Returns:
        Lower-case level name.

    Raises:
        BaroConfigError: If the level is not supported.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise BaroConfigError(
            f"Invalid {source_name} value: expected one of "
            f"{', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return level
