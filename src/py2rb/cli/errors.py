# topmark:header:start
#
#   project      : Py2Rb
#   file         : errors.py
#   file_relpath : src/py2rb/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Py2Rb CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from py2rb.core.exit_codes import ExitCode


class Py2RbError(click.ClickException):
    """Base class for all Py2Rb CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class Py2RbUsageError(Py2RbError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class Py2RbConfigError(Py2RbError):
    """Error for configuration errors (unreadable or malformed config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class Py2RbIOError(Py2RbError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class Py2RbEncodingError(Py2RbError):
    """Error for text decoding/encoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
