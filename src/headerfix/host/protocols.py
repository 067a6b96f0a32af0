# topmark:header:start
#
#   project      : HeaderFix
#   file         : protocols.py
#   file_relpath : src/headerfix/host/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host interface the fix pipeline calls through.

The header engine never reads files or configuration itself. A host hands it
the leading trivia, the filename and the settings of a document, and reattaches
the computed trivia afterwards. Hosts are injected, so the engine can be driven
by the file system, an editor buffer or a test double alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from headerfix.core.settings import HeaderSettings
    from headerfix.core.trivia import TriviaSequence

DocT = TypeVar("DocT")


class HeaderHost(Protocol[DocT]):
    """Capabilities a host must provide for documents of type ``DocT``."""

    def get_leading_trivia(self, document: DocT) -> TriviaSequence:
        """Return the leading trivia of ``document``."""
        ...

    def get_settings(self, document: DocT) -> HeaderSettings:
        """Return the effective header settings for ``document``."""
        ...

    def get_filename(self, document: DocT) -> str:
        """Return the filename written into the header of ``document``."""
        ...

    def get_newline(self, document: DocT) -> str:
        """Return the line terminator used for the rendered header of ``document``."""
        ...

    def with_leading_trivia(self, document: DocT, trivia: TriviaSequence) -> DocT:
        """Return ``document`` with its leading trivia replaced by ``trivia``."""
        ...
