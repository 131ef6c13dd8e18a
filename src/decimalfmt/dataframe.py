"""Polars integration - format numeric columns as strings."""

from __future__ import annotations

from typing import Any

import polars as pl

from decimalfmt.formatter import DecimalFormat
from decimalfmt.rounding import RoundingMode


def format_series(
    series: pl.Series,
    pattern: str | None = None,
    rounding_mode: RoundingMode | str = RoundingMode.HALF_UP,
) -> pl.Series:
    """Format every value of a Series.

    Args:
        series: Numeric (or numeric string) Polars Series.
        pattern: Decimal format pattern.
        rounding_mode: Rounding discipline.

    Returns:
        A String Series with the same name; nulls stay null.

    Raises:
        PatternSyntaxError: If the pattern is invalid.
        FormatError: If a value is not a valid number.
    """
    formatter = DecimalFormat(pattern, rounding_mode)
    return series.map_elements(formatter.format, return_dtype=pl.String)


def format_columns(
    df: pl.DataFrame | pl.LazyFrame,
    columns: list[str],
    pattern: str | None = None,
    rounding_mode: RoundingMode | str = RoundingMode.HALF_UP,
) -> pl.DataFrame:
    """Replace the given columns with their formatted string form.

    Args:
        df: Polars DataFrame or LazyFrame.
        columns: Columns to format.
        pattern: Decimal format pattern.
        rounding_mode: Rounding discipline.

    Returns:
        Collected DataFrame with the formatted columns.

    Raises:
        KeyError: If a column does not exist.
    """
    if isinstance(df, pl.LazyFrame):
        df = df.collect()

    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise KeyError(f"Columns not found: {', '.join(missing)}")

    formatter = DecimalFormat(pattern, rounding_mode)

    def format_value(value: Any) -> str | None:
        if value is None:
            return None
        return formatter.format(value)

    return df.with_columns(
        [pl.col(col).map_elements(format_value, return_dtype=pl.String).alias(col) for col in columns]
    )
