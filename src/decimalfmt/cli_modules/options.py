"""Reusable CLI options and option parsing helpers."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from decimalfmt.cli_modules.errors import UsageError
from decimalfmt.config import FormatterConfig
from decimalfmt.rounding import RoundingMode


PatternOpt = Annotated[
    Optional[str],
    typer.Option("--pattern", "-p", help="Decimal format pattern (default: $DECIMALFMT_PATTERN or #,##0.###)"),
]

RoundingModeOpt = Annotated[
    Optional[str],
    typer.Option(
        "--rounding-mode",
        "-r",
        help="Rounding mode: up, down, ceiling, floor, half_up, half_down, half_even, unnecessary",
    ),
]


def parse_list_callback(
    values: list[str] | None,
    separator: str = ",",
) -> list[str] | None:
    """Parse multiple list options into a single flat list.

    Args:
        values: List of comma-separated strings
        separator: Separator character

    Returns:
        Flattened list of strings
    """
    if values is None:
        return None
    result = []
    for value in values:
        result.extend(item.strip() for item in value.split(separator) if item.strip())
    return result if result else None


def resolve_config(pattern: str | None, rounding_mode: str | None) -> FormatterConfig:
    """Merge command-line options over the environment configuration.

    Raises:
        UsageError: If the rounding mode name is unknown.
    """
    try:
        env = FormatterConfig.from_env()
        mode = RoundingMode.from_string(rounding_mode) if rounding_mode else env.rounding_mode
    except ValueError as e:
        raise UsageError(str(e)) from e
    return FormatterConfig(pattern=pattern or env.pattern, rounding_mode=mode)
