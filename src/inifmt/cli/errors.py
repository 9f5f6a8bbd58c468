# topmark:header:start
#
#   project      : IniFmt
#   file         : errors.py
#   file_relpath : src/inifmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IniFmt CLI.

Raise these from the I/O shell to stop with a standardized message and exit
code. The formatter core never raises them.

Styling:
    Exceptions render through the project console stored on the Click context
    (see `InifmtError.show`); without one they fall back to Click's default output.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from inifmt.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


class InifmtError(click.ClickException):
    """Base class for all IniFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text; colour is applied in `show()`."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class InifmtUsageError(InifmtError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class InifmtConfigError(InifmtError):
    """Error for configuration files that cannot be read or parsed."""

    exit_code = ExitCode.CONFIG_ERROR


class InifmtFileNotFoundError(InifmtError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class InifmtPermissionDeniedError(InifmtError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class InifmtIOError(InifmtError):
    """Error for other I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class InifmtEncodingError(InifmtError):
    """Error for input that cannot be decoded as UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


def error_from_os_error(exc: OSError, path: Path | str) -> InifmtError:
    """Map an ``OSError`` raised for ``path`` onto the matching CLI error.

    Args:
        exc (OSError): The error raised by the filesystem call.
        path (Path | str): The path involved, used in the message.

    Returns:
        InifmtError: A `InifmtFileNotFoundError`, `InifmtPermissionDeniedError`
        or `InifmtIOError`.
    """
    match exc:
        case FileNotFoundError():
            return InifmtFileNotFoundError(f"No such file: {path}")
        case PermissionError():
            return InifmtPermissionDeniedError(f"Permission denied: {path}")
        case IsADirectoryError():
            return InifmtIOError(f"Is a directory: {path}")
        case _:
            return InifmtIOError(f"Cannot access {path}: {exc.strerror or exc}")
