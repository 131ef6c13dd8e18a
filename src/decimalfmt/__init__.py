"""decimalfmt - Pattern-based decimal number formatting.

Example:
    from decimalfmt import DecimalFormat, RoundingMode

    df = DecimalFormat("#,##0.00")
    df.format(1234567.156)  # "1,234,567.16"

    pct = DecimalFormat("#,##0.#%", RoundingMode.HALF_EVEN)
    pct.format(0.1456)  # "14.6%"
"""

from decimalfmt.config import FormatterConfig, create_formatter
from decimalfmt.exceptions import (
    DecimalFormatError,
    FormatError,
    PatternSyntaxError,
    RoundingError,
)
from decimalfmt.formatter import DecimalFormat, format_decimal, to_decimal
from decimalfmt.pattern import DEFAULT_PATTERN, PatternSpec, parse_pattern
from decimalfmt.renderer import render
from decimalfmt.rounding import RoundingMode, round_magnitude

__version__ = "0.1.0"

__all__ = [
    # Formatter
    "DecimalFormat",
    "format_decimal",
    "to_decimal",
    # Pattern
    "DEFAULT_PATTERN",
    "PatternSpec",
    "parse_pattern",
    # Rounding
    "RoundingMode",
    "round_magnitude",
    # Rendering
    "render",
    # Configuration
    "FormatterConfig",
    "create_formatter",
    # Exceptions
    "DecimalFormatError",
    "PatternSyntaxError",
    "FormatError",
    "RoundingError",
]
