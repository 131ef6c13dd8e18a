"""CLI error handling utilities.

Maps library errors to stable exit codes and prints them consistently.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, TypeVar

import typer

from decimalfmt.exceptions import FormatError, PatternSyntaxError, RoundingError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Standard CLI exit codes."""

    GENERAL_ERROR = 1
    USAGE_ERROR = 2

    FILE_NOT_FOUND = 10

    INVALID_PATTERN = 20
    INVALID_VALUE = 21


# =============================================================================
# Exception Classes
# =============================================================================


class CLIError(Exception):
    """Base exception for CLI errors.

    Attributes:
        message: Error message
        code: Error code
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class FileNotFoundError(CLIError):
    """Error when an input file is not found."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            message=f"File not found: {path}",
            code=ErrorCode.FILE_NOT_FOUND,
            hint="Check that the file exists and the path is correct.",
        )
        self.path = path


class UsageError(CLIError):
    """Error for invalid option values."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message=message, code=ErrorCode.USAGE_ERROR, hint=hint)


def _from_library_error(error: Exception) -> CLIError:
    if isinstance(error, PatternSyntaxError):
        return CLIError(
            message=f"{error.message}: {error.pattern!r}",
            code=ErrorCode.INVALID_PATTERN,
            hint="Escape literal pattern characters with a backslash.",
        )
    if isinstance(error, FormatError):
        return CLIError(message=f"{error.message}: {error.value!r}", code=ErrorCode.INVALID_VALUE)
    if isinstance(error, RoundingError):
        return CLIError(
            message=error.message,
            code=ErrorCode.INVALID_VALUE,
            hint="Use a pattern with more fraction digits or another rounding mode.",
        )
    return CLIError(message=str(error))


# =============================================================================
# Error Boundary
# =============================================================================


def error_boundary(func: F) -> F:
    """Catch exceptions raised by a command and turn them into exit codes.

    Args:
        func: Command function to wrap

    Returns:
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except (PatternSyntaxError, FormatError, RoundingError) as e:
            _report(_from_library_error(e))
        except CLIError as e:
            _report(e)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(ErrorCode.GENERAL_ERROR.value)

    return wrapper  # type: ignore


def _report(error: CLIError) -> None:
    typer.echo(typer.style(f"Error: {error.message}", fg="red"), err=True)
    if error.hint:
        typer.echo(typer.style(f"Hint: {error.hint}", fg="yellow"), err=True)
    raise typer.Exit(error.code.value)


def require_file(path: Path) -> Path:
    """Require that a file exists.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return path
