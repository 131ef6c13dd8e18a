"""CLI building blocks: commands, shared options and error handling."""

from decimalfmt.cli_modules.commands import column_cmd, format_cmd, inspect_cmd
from decimalfmt.cli_modules.errors import CLIError, ErrorCode, error_boundary

__all__ = [
    "column_cmd",
    "format_cmd",
    "inspect_cmd",
    "CLIError",
    "ErrorCode",
    "error_boundary",
]
