"""Command implementations for the decimalfmt CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from decimalfmt.cli_modules.errors import UsageError, error_boundary, require_file
from decimalfmt.cli_modules.options import (
    PatternOpt,
    RoundingModeOpt,
    parse_list_callback,
    resolve_config,
)
from decimalfmt.config import create_formatter
from decimalfmt.pattern import parse_pattern


@error_boundary
def format_cmd(
    values: Annotated[
        list[str],
        typer.Argument(help="Numbers to format (use -- before negative numbers)"),
    ],
    pattern: PatternOpt = None,
    rounding_mode: RoundingModeOpt = None,
) -> None:
    """Format one or more numbers, one result per line.

    Examples:
        decimalfmt format 1234567.156 -p "#,##0.00"
        decimalfmt format 0.1456 -p "#,##0.#%"
        decimalfmt format -r half_even -p 0.0 -- 13.25 -13.25
    """
    formatter = create_formatter(resolve_config(pattern, rounding_mode))
    for value in values:
        typer.echo(formatter.format(value))


@error_boundary
def inspect_cmd(
    pattern: Annotated[str, typer.Argument(help="Pattern to parse")],
) -> None:
    """Show how a pattern is parsed."""
    spec = parse_pattern(pattern)

    table = Table(title=f"Pattern {pattern!r}", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Prefix", repr(spec.prefix))
    table.add_row("Suffix", repr(spec.suffix))
    table.add_row("Integer min digits", str(spec.integer_min_digits))
    table.add_row("Grouping", f"every {spec.grouping_size}" if spec.grouping_enabled else "off")
    table.add_row("Fraction digits", f"{spec.fraction_min_digits}..{spec.fraction_max_digits}")
    table.add_row("Scale", f"x{spec.scale}")
    table.add_row("Sign slot", "-" if spec.sign_slot is None else str(spec.sign_slot))

    Console().print(table)


@error_boundary
def column_cmd(
    file: Annotated[
        Path,
        typer.Argument(help="Path to a CSV, Parquet or JSON file"),
    ],
    columns: Annotated[
        Optional[list[str]],
        typer.Option("--columns", "-c", help="Columns to format (comma-separated)"),
    ] = None,
    pattern: PatternOpt = None,
    rounding_mode: RoundingModeOpt = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path (format by extension)"),
    ] = None,
) -> None:
    """Format numeric columns of a data file.

    Examples:
        decimalfmt column sales.csv -c amount -p "#,##0.00"
        decimalfmt column sales.parquet -c share -p "0.#%" -o shares.csv
    """
    import polars as pl

    from decimalfmt.dataframe import format_columns

    require_file(file)
    column_list = parse_list_callback(columns)
    if not column_list:
        raise UsageError("No columns given", hint="Pass --columns/-c with one or more column names.")

    suffix = file.suffix.lower()
    if suffix == ".parquet":
        df = pl.read_parquet(file)
    elif suffix == ".json":
        df = pl.read_json(file)
    else:
        df = pl.read_csv(file)

    missing = [col for col in column_list if col not in df.columns]
    if missing:
        raise UsageError(
            f"Columns not found: {', '.join(missing)}",
            hint=f"Available columns: {', '.join(df.columns)}",
        )

    config = resolve_config(pattern, rounding_mode)
    result = format_columns(df, column_list, config.pattern, config.rounding_mode)

    if output is None:
        typer.echo(result.write_csv())
        return

    out_suffix = output.suffix.lower()
    if out_suffix == ".parquet":
        result.write_parquet(output)
    elif out_suffix == ".json":
        result.write_json(output)
    else:
        result.write_csv(output)
    typer.echo(f"Formatted data written to {output}")
