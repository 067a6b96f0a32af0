# topmark:header:start
#
#   project      : HeaderFix
#   file         : errors.py
#   file_relpath : src/headerfix/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the HeaderFix CLI.

Each class carries the `ExitCode` Click exits with. Errors are displayed through
the project console when one is attached to the Click context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from headerfix.cli.exit_codes import ExitCode


class HeaderfixError(click.ClickException):
    """Base class for all HeaderFix CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message (colors are applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error through the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class HeaderfixUsageError(HeaderfixError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class HeaderfixConfigError(HeaderfixError):
    """Error for configuration errors (unreadable/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class HeaderfixFileNotFoundError(HeaderfixError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeaderfixPipelineError(HeaderfixError):
    """Error for engine contract violations."""

    exit_code = ExitCode.PIPELINE_ERROR
