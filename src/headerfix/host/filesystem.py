# topmark:header:start
#
#   project      : HeaderFix
#   file         : filesystem.py
#   file_relpath : src/headerfix/host/filesystem.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`HeaderHost` implementation for `SourceDocument` files on disk."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from headerfix.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from headerfix.config import Config
    from headerfix.config.logging import HeaderfixLogger
    from headerfix.core.settings import HeaderSettings
    from headerfix.core.trivia import TriviaSequence
    from headerfix.host.document import SourceDocument

logger: HeaderfixLogger = get_logger(__name__)

SettingsResolver = Callable[["Path"], "HeaderSettings"]


class FileHeaderHost:
    """Host for on-disk source files.

    Settings are resolved per document path. The common case is a single
    configuration for the whole run (`from_config`); callers that need per-directory
    settings pass their own resolver.

    Rendered headers use the newline style of the document they are written into,
    so LF files stay LF and CRLF files stay CRLF.

    Args:
        settings_for (SettingsResolver): Returns the header settings for a path.
    """

    def __init__(self, settings_for: SettingsResolver) -> None:
        self._settings_for = settings_for

    @classmethod
    def from_config(cls, config: Config) -> FileHeaderHost:
        """Return a host that uses ``config`` for every document."""
        settings: HeaderSettings = config.header_settings()
        logger.debug("Header settings resolved from config: %s", settings)
        return cls(lambda _path: settings)

    def get_leading_trivia(self, document: SourceDocument) -> TriviaSequence:
        return document.leading_trivia

    def get_settings(self, document: SourceDocument) -> HeaderSettings:
        return self._settings_for(document.path)

    def get_filename(self, document: SourceDocument) -> str:
        return document.name

    def get_newline(self, document: SourceDocument) -> str:
        return document.newline

    def with_leading_trivia(
        self,
        document: SourceDocument,
        trivia: TriviaSequence,
    ) -> SourceDocument:
        return document.with_leading_trivia(trivia)
