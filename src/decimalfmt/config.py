"""Formatter configuration.

Dataclass-based configuration with presets for common patterns and
environment variable overrides.

Environment variables:
    DECIMALFMT_PATTERN: Default pattern string.
    DECIMALFMT_ROUNDING_MODE: Default rounding mode name (e.g. ``half_even``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from decimalfmt.formatter import DecimalFormat
from decimalfmt.pattern import DEFAULT_PATTERN
from decimalfmt.rounding import RoundingMode

PATTERN_ENV_VAR = "DECIMALFMT_PATTERN"
ROUNDING_MODE_ENV_VAR = "DECIMALFMT_ROUNDING_MODE"


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for a DecimalFormat.

    Attributes:
        pattern: Decimal format pattern.
        rounding_mode: Rounding discipline; strings are converted with
            ``RoundingMode.from_string``.
    """

    pattern: str = DEFAULT_PATTERN
    rounding_mode: RoundingMode = RoundingMode.HALF_UP

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.pattern:
            raise ValueError("pattern must not be empty")
        if not isinstance(self.rounding_mode, RoundingMode):
            object.__setattr__(self, "rounding_mode", RoundingMode.from_string(str(self.rounding_mode)))

    @classmethod
    def currency(cls) -> "FormatterConfig":
        """Two fixed decimals with banker's rounding."""
        return cls(pattern="#,##0.00", rounding_mode=RoundingMode.HALF_EVEN)

    @classmethod
    def percent(cls) -> "FormatterConfig":
        """Percentage with up to two decimals."""
        return cls(pattern="#,##0.##%")

    @classmethod
    def per_mille(cls) -> "FormatterConfig":
        """Per-mille with up to one decimal."""
        return cls(pattern="#,##0.#‰")

    @classmethod
    def integer(cls) -> "FormatterConfig":
        """Grouped whole numbers."""
        return cls(pattern="#,##0")

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Build a configuration from environment variables.

        Unset or empty variables fall back to the defaults.
        """
        pattern = os.getenv(PATTERN_ENV_VAR) or DEFAULT_PATTERN
        mode = os.getenv(ROUNDING_MODE_ENV_VAR)
        return cls(
            pattern=pattern,
            rounding_mode=RoundingMode.from_string(mode) if mode else RoundingMode.HALF_UP,
        )


def create_formatter(config: FormatterConfig | None = None) -> DecimalFormat:
    """Create a DecimalFormat from a configuration (defaults if None)."""
    config = config or FormatterConfig()
    return DecimalFormat(config.pattern, config.rounding_mode)
