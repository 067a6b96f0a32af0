# topmark:header:start
#
#   project      : HeaderFix
#   file         : console.py
#   file_relpath : src/headerfix/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for user-facing program output.

Program output (rendered headers, per-file results, diffs) goes through
`ClickConsole`; diagnostics go through `logging`. Keeping them apart lets
``-q`` silence the former without touching the latter.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console backed by ``click.echo``.

    Args:
        enable_color (bool): Emit ANSI color codes.
        verbosity (int): Program-output verbosity (``-1`` quiet, ``0`` normal,
            ``1+`` verbose). `print` is suppressed when quiet.
        out (TextIO | None): Stream for standard output (default ``sys.stdout``).
        err (TextIO | None): Stream for error output (default ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity: int = 0,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity = verbosity
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout unless the console is quiet."""
        if self.verbosity < 0:
            return
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def write(self, text: str) -> None:
        """Write ``text`` to stdout verbatim, even when quiet (payload output)."""
        click.echo(text, nl=False, file=self.out or sys.stdout, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style`` (plain when color is off)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
