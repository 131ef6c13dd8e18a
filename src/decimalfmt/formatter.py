"""DecimalFormat - pattern-based number formatting.

Example:
    >>> from decimalfmt import DecimalFormat, RoundingMode
    >>> df = DecimalFormat("#,##0.00")
    >>> df.format(1234567.156)
    '1,234,567.16'
    >>> df.set_rounding_mode(RoundingMode.DOWN)
    >>> df.format(1234567.156)
    '1,234,567.15'

Thread safety:
    ``format`` only reads the pattern and the current rounding mode, so a
    single instance may be shared between threads. ``set_rounding_mode``
    is an unsynchronized attribute write; calls racing with ``format``
    observe either the old or the new mode.
"""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal, DecimalException, InvalidOperation, localcontext
from typing import Any

from decimalfmt.exceptions import FormatError
from decimalfmt.pattern import DEFAULT_PATTERN, PatternSpec, parse_pattern
from decimalfmt.renderer import render
from decimalfmt.rounding import RoundingMode, round_magnitude

logger = logging.getLogger(__name__)


def to_decimal(value: Any) -> Decimal:
    """Coerce ``value`` to a finite Decimal.

    Floats go through ``repr`` so that ``13.15`` becomes ``Decimal("13.15")``
    rather than the exact binary expansion.

    Raises:
        FormatError: If the value is not a finite number.
    """
    if isinstance(value, bool) or not isinstance(value, (str, numbers.Real, Decimal)):
        raise FormatError(value)

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, str):
            result = Decimal(value.strip())
        elif isinstance(value, numbers.Integral):
            result = Decimal(int(value))
        else:
            number = float(value)
            result = Decimal(repr(number)) if math.isfinite(number) else Decimal("NaN")
    except (InvalidOperation, ValueError, TypeError) as e:
        raise FormatError(value) from e

    if not result.is_finite():
        raise FormatError(value)
    return result


def _coerce_mode(mode: RoundingMode | str | None) -> RoundingMode:
    if mode is None:
        return RoundingMode.HALF_UP
    if isinstance(mode, RoundingMode):
        return mode
    if not isinstance(mode, str):
        valid = ", ".join(m.value for m in RoundingMode)
        raise ValueError(f"Unknown rounding mode: {mode!r}. Use one of: {valid}")
    return RoundingMode.from_string(mode)


class DecimalFormat:
    """Formats numbers according to a decimal format pattern.

    The pattern is parsed once at construction; only the rounding mode can
    change afterwards.

    Args:
        pattern: Pattern string, defaults to ``"#,##0.###"``.
        rounding_mode: Rounding discipline; None or omitted means HALF_UP.

    Raises:
        PatternSyntaxError: If the pattern is invalid.
    """

    def __init__(
        self,
        pattern: str | None = None,
        rounding_mode: RoundingMode | str | None = RoundingMode.HALF_UP,
    ) -> None:
        self._spec = parse_pattern(DEFAULT_PATTERN if pattern is None else pattern)
        self._rounding_mode = _coerce_mode(rounding_mode)

    @property
    def spec(self) -> PatternSpec:
        """The parsed pattern."""
        return self._spec

    @property
    def pattern(self) -> str:
        return self._spec.pattern

    @property
    def rounding_mode(self) -> RoundingMode:
        return self._rounding_mode

    def set_rounding_mode(self, mode: RoundingMode | str | None) -> None:
        """Replace the rounding mode used by subsequent ``format`` calls."""
        self._rounding_mode = _coerce_mode(mode)
        logger.debug(f"Rounding mode for {self._spec.pattern!r} set to {self._rounding_mode.value}")

    def format(self, value: Any) -> str:
        """Format a number.

        Args:
            value: int, float, Decimal, other real number, or numeric string.

        Returns:
            Formatted string.

        Raises:
            FormatError: If ``value`` is not a finite number.
            RoundingError: If the mode is UNNECESSARY and the value needs rounding.
        """
        spec = self._spec
        mode = self._rounding_mode
        number = to_decimal(value)

        negative = number.is_signed() and not number.is_zero()
        try:
            if spec.scale != 1:
                with localcontext() as ctx:
                    ctx.prec = max(ctx.prec, len(number.as_tuple().digits) + 4)
                    number = number * spec.scale
            rounded = round_magnitude(number.copy_abs(), spec.fraction_max_digits, mode, negative)
        except DecimalException as e:
            # Finite but beyond the decimal context's exponent range.
            raise FormatError(value) from e
        return render(spec, rounded, negative)

    def __call__(self, value: Any) -> str:
        return self.format(value)

    def __repr__(self) -> str:
        return f"DecimalFormat({self._spec.pattern!r}, RoundingMode.{self._rounding_mode.name})"


def format_decimal(
    value: Any,
    pattern: str | None = None,
    rounding_mode: RoundingMode | str | None = RoundingMode.HALF_UP,
) -> str:
    """Format a single value without keeping a formatter around.

    Example:
        >>> format_decimal(0.1456, "#,##0.#%")
        '14.6%'
    """
    return DecimalFormat(pattern, rounding_mode).format(value)
