# topmark:header:start
#
#   project      : HeaderFix
#   file         : errors.py
#   file_relpath : src/headerfix/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the HeaderFix engine, host layer and configuration loader.

These are framework-agnostic. The CLI maps them onto
[`headerfix.cli.errors`][headerfix.cli.errors] exceptions with proper exit codes.
"""

from __future__ import annotations

from pathlib import Path


class HeaderEngineError(Exception):
    """Base class for all non-CLI HeaderFix errors."""


class HeaderContractError(HeaderEngineError, ValueError):
    """A caller violated a precondition of the engine (e.g. ``None`` settings)."""


class FixCancelledError(HeaderEngineError):
    """The host requested cancellation before a fix could start.

    Attributes:
        completed (tuple[object, ...]): Results finished before cancellation (batch runs).
    """

    def __init__(self, message: str, *, completed: tuple[object, ...] = ()) -> None:
        self.completed = completed
        super().__init__(message)


class ConfigError(HeaderEngineError):
    """A configuration file could not be read or holds invalid values.

    Attributes:
        path (Path | None): The offending configuration file, if known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
