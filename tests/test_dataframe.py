"""Tests for Polars column formatting."""

from __future__ import annotations

import polars as pl
import pytest

from decimalfmt.dataframe import format_columns, format_series
from decimalfmt.exceptions import FormatError, PatternSyntaxError
from decimalfmt.rounding import RoundingMode


@pytest.fixture
def sales_df() -> pl.DataFrame:
    """Create a small sales frame."""
    return pl.DataFrame(
        {
            "region": ["north", "south", "east"],
            "amount": [1234.5, 987654.321, None],
            "share": [0.1456, 0.5, 0.3544],
        }
    )


class TestFormatSeries:
    def test_basic(self):
        series = pl.Series("amount", [1234.5, 0.125, None])

        result = format_series(series, "#,##0.00")

        assert result.name == "amount"
        assert result.dtype == pl.String
        assert result.to_list() == ["1,234.50", "0.13", None]

    def test_rounding_mode(self):
        series = pl.Series("x", [0.125, 0.135])
        result = format_series(series, "0.00", RoundingMode.HALF_EVEN)
        assert result.to_list() == ["0.12", "0.14"]

    def test_integer_series(self):
        series = pl.Series("n", [1, 22, 333])
        assert format_series(series, "000").to_list() == ["001", "022", "333"]

    def test_invalid_pattern(self):
        with pytest.raises(PatternSyntaxError):
            format_series(pl.Series("x", [1.0]), "0..0")

    def test_string_series_keeps_name_and_nulls(self):
        series = pl.Series("raw", ["1234.5", None, "-0.5"])

        result = format_series(series, "#,##0.0")

        assert result.name == "raw"
        assert result.dtype == pl.String
        assert result.to_list() == ["1,234.5", None, "-0.5"]

    def test_invalid_value(self):
        with pytest.raises(FormatError):
            format_series(pl.Series("x", ["1.5", "abc"]), "0.0")


class TestFormatColumns:
    def test_single_column(self, sales_df):
        result = format_columns(sales_df, ["amount"], "#,##0.00")

        assert result["amount"].to_list() == ["1,234.50", "987,654.32", None]
        assert result["share"].dtype == pl.Float64
        assert result["region"].to_list() == ["north", "south", "east"]

    def test_multiple_columns(self, sales_df):
        result = format_columns(sales_df, ["amount", "share"], "#,##0.#%")

        assert result["share"].to_list() == ["14.6%", "50%", "35.4%"]
        assert result["amount"][0] == "123,450%"

    def test_lazy_frame(self, sales_df):
        result = format_columns(sales_df.lazy(), ["share"], "0.00")

        assert isinstance(result, pl.DataFrame)
        assert result["share"].to_list() == ["0.15", "0.50", "0.35"]

    def test_missing_column(self, sales_df):
        with pytest.raises(KeyError, match="missing"):
            format_columns(sales_df, ["amount", "missing"], "0")
