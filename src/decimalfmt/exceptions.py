"""Exception classes for decimalfmt.

All errors raised by the library derive from ``DecimalFormatError`` and
carry a fixed leading message plus a ``details`` dict describing the
offending input.
"""

from __future__ import annotations

from typing import Any


class DecimalFormatError(Exception):
    """Base exception for decimalfmt errors.

    Attributes:
        message: Error message
        details: Additional error details
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class PatternSyntaxError(DecimalFormatError, ValueError):
    """Raised when a pattern string violates the pattern grammar.

    Attributes:
        pattern: The raw pattern that failed to parse
        position: Index into the raw pattern where the problem was found
    """

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        super().__init__(message, details={"pattern": pattern, "position": position})
        self.pattern = pattern
        self.position = position


class FormatError(DecimalFormatError, ValueError):
    """Raised when a value cannot be coerced to a finite number."""

    def __init__(self, value: Any) -> None:
        super().__init__("not a valid number", details={"value": repr(value)})
        self.value = value


class RoundingError(DecimalFormatError, ArithmeticError):
    """Raised when UNNECESSARY rounding would lose precision."""

    def __init__(self, value: Any, max_fraction_digits: int) -> None:
        super().__init__(
            f"Rounding needed with the rounding mode being set to UNNECESSARY: "
            f"{value} does not fit in {max_fraction_digits} fraction digit(s)",
            details={"value": str(value), "max_fraction_digits": max_fraction_digits},
        )
        self.value = value
        self.max_fraction_digits = max_fraction_digits
