"""Rendering of rounded magnitudes according to a PatternSpec."""

from __future__ import annotations

from decimal import Decimal

from decimalfmt.pattern import DECIMAL_SEPARATOR, GROUPING_SEPARATOR, PatternSpec

MINUS_SIGN = "-"


def apply_grouping(digits: str, size: int, separator: str = GROUPING_SEPARATOR) -> str:
    """Insert ``separator`` every ``size`` digits, counting from the right."""
    groups = []
    while len(digits) > size:
        groups.insert(0, digits[-size:])
        digits = digits[:-size]
    groups.insert(0, digits)
    return separator.join(groups)


def _split_digits(rounded: Decimal, spec: PatternSpec) -> tuple[str, str]:
    text = format(rounded, "f")
    int_part, _, frac_part = text.partition(".")
    # Values quantized elsewhere may carry fewer fraction digits than the pattern allows.
    frac_part = frac_part.ljust(spec.fraction_max_digits, "0")[: spec.fraction_max_digits]
    return int_part.lstrip("0"), frac_part


def render(spec: PatternSpec, rounded: Decimal, negative: bool) -> str:
    """Render a rounded, non-negative magnitude.

    Args:
        spec: Parsed pattern.
        rounded: Magnitude already rounded to ``spec.fraction_max_digits``.
        negative: Whether to render a minus sign. Ignored when the
            magnitude is zero.

    Returns:
        The formatted string.
    """
    int_digits, frac_digits = _split_digits(rounded, spec)

    while len(frac_digits) > spec.fraction_min_digits and frac_digits.endswith("0"):
        frac_digits = frac_digits[:-1]

    int_digits = int_digits.zfill(spec.integer_min_digits)
    if not int_digits and not frac_digits:
        int_digits = "0"

    if spec.grouping_enabled:
        int_digits = apply_grouping(int_digits, spec.grouping_size)

    number = int_digits
    if frac_digits:
        number = f"{number}{DECIMAL_SEPARATOR}{frac_digits}"

    prefix = spec.prefix
    if negative and rounded != 0:
        if spec.sign_slot is not None:
            prefix = f"{prefix[: spec.sign_slot]}{MINUS_SIGN}{prefix[spec.sign_slot + 1 :]}"
        else:
            prefix = f"{prefix}{MINUS_SIGN}"

    return f"{prefix}{number}{spec.suffix}"
