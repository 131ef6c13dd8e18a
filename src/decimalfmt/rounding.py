"""Rounding modes and exact decimal rounding.

Rounding always works on a non-negative ``Decimal`` magnitude; the caller
keeps track of the sign and passes it in only so that the directed modes
(CEILING, FLOOR) can pick the right direction.
"""

from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
    localcontext,
)
from enum import Enum

from decimalfmt.exceptions import RoundingError


class RoundingMode(str, Enum):
    """Rounding disciplines applied at the last kept fraction digit."""

    UP = "up"
    DOWN = "down"
    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_EVEN = "half_even"
    UNNECESSARY = "unnecessary"

    @classmethod
    def from_string(cls, value: str) -> "RoundingMode":
        """Convert a string to a RoundingMode.

        Accepts ``"half_even"``, ``"HALF_EVEN"``, ``"HalfEven"`` and
        ``"half-even"`` alike.

        Raises:
            ValueError: If the name is not a known rounding mode.
        """
        key = value.strip().replace("-", "").replace("_", "").lower()
        for mode in cls:
            if mode.value.replace("_", "") == key:
                return mode
        valid = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown rounding mode: {value!r}. Use one of: {valid}")


# Modes whose direction does not depend on the sign of the value.
_SIGN_INDEPENDENT = {
    RoundingMode.UP: ROUND_UP,
    RoundingMode.DOWN: ROUND_DOWN,
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def _decimal_rounding(mode: RoundingMode, negative: bool) -> str:
    if mode in _SIGN_INDEPENDENT:
        return _SIGN_INDEPENDENT[mode]
    # On a magnitude, rounding toward +inf for a negative value truncates.
    if mode is RoundingMode.CEILING:
        return ROUND_DOWN if negative else ROUND_UP
    if mode is RoundingMode.FLOOR:
        return ROUND_UP if negative else ROUND_DOWN
    raise ValueError(f"No decimal rounding for mode {mode}")


def round_magnitude(
    magnitude: Decimal,
    max_fraction_digits: int,
    mode: RoundingMode,
    negative: bool = False,
) -> Decimal:
    """Round a non-negative decimal to ``max_fraction_digits`` places.

    Args:
        magnitude: Absolute value to round.
        max_fraction_digits: Number of fraction digits to keep.
        mode: Rounding discipline.
        negative: Whether the original value was negative.

    Returns:
        A Decimal whose exponent is exactly ``-max_fraction_digits``.

    Raises:
        RoundingError: If ``mode`` is UNNECESSARY and digits would be lost.
        ValueError: If ``magnitude`` is negative or not finite.
    """
    if not magnitude.is_finite() or magnitude < 0:
        raise ValueError(f"magnitude must be a finite non-negative decimal, got {magnitude}")
    if max_fraction_digits < 0:
        raise ValueError("max_fraction_digits must be non-negative")

    quantum = Decimal(1).scaleb(-max_fraction_digits)
    with localcontext() as ctx:
        # quantize() fails when the result needs more digits than the context allows
        ctx.prec = max(ctx.prec, magnitude.adjusted() + max_fraction_digits + 2)

        if mode is RoundingMode.UNNECESSARY:
            rounded = magnitude.quantize(quantum, rounding=ROUND_DOWN)
            if rounded != magnitude:
                raise RoundingError(magnitude, max_fraction_digits)
            return rounded

        return magnitude.quantize(quantum, rounding=_decimal_rounding(mode, negative))
