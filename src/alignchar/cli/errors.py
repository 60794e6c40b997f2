# topmark:header:start
#
#   project      : AlignChar
#   file         : errors.py
#   file_relpath : src/alignchar/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Exceptions for the AlignChar CLI.

Usage:
    Raise these exceptions in the CLI to signal errors with standardized
    messages and exit codes. Library errors (`alignchar.core.errors`) are
    translated with `from_exception`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from alignchar.cli.exit_codes import ExitCode
from alignchar.core.errors import AlignConfigError, AlignIOError, AlignUsageError


class AlignCharCliError(click.ClickException):
    """Base class for all AlignChar CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class AlignCharUsageError(AlignCharCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AlignCharConfigError(AlignCharCliError):
    """Error for configuration errors (invalid values, malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AlignCharFileNotFoundError(AlignCharCliError):
    """Error when the input path does not exist (output-side failures are `AlignCharIOError`)."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AlignCharPermissionDeniedError(AlignCharCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class AlignCharIOError(AlignCharCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class AlignCharUnexpectedError(AlignCharCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_exception(exc: Exception) -> AlignCharCliError:
    """Translate a library or OS exception into the matching CLI error.

    Args:
        exc (Exception): The exception raised while processing.

    Returns:
        AlignCharCliError: The CLI error to raise (chain it with ``from exc``).
    """
    if isinstance(exc, AlignConfigError):
        return AlignCharConfigError(str(exc))
    if isinstance(exc, AlignUsageError):
        return AlignCharUsageError(str(exc))
    if isinstance(exc, AlignIOError):
        return AlignCharIOError(str(exc))
    if isinstance(exc, FileNotFoundError):
        return AlignCharFileNotFoundError(f"No such file: {exc.filename or exc}")
    if isinstance(exc, PermissionError):
        return AlignCharPermissionDeniedError(f"Permission denied: {exc.filename or exc}")
    if isinstance(exc, OSError):
        return AlignCharIOError(str(exc))
    return AlignCharUnexpectedError(f"Unexpected error: {exc}")
