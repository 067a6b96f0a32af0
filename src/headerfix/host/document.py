# topmark:header:start
#
#   project      : HeaderFix
#   file         : document.py
#   file_relpath : src/headerfix/host/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory source documents and their leading trivia.

A `SourceDocument` is an immutable snapshot of one file. It is split into three
parts:

- an optional UTF-8 byte order mark (never part of the trivia);
- the leading trivia, as tokenized by `headerfix.core.lexer`;
- the body, starting at the first substantive token.

`with_leading_trivia` reassembles a new document from new trivia and the
untouched BOM and body.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from headerfix.constants import UTF8_BOM
from headerfix.core.lexer import lex_leading_trivia
from headerfix.core.trivia import TriviaSequence, trivia_to_text

# Newline used when a document has no line terminator at all.
DEFAULT_NEWLINE: str = "\r\n"


def detect_newline(text: str) -> str:
    """Return the first line terminator in ``text`` (``\\r\\n`` when there is none)."""
    for i, ch in enumerate(text):
        if ch == "\r":
            return "\r\n" if text.startswith("\r\n", i) else "\r"
        if ch == "\n":
            return "\n"
    return DEFAULT_NEWLINE


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """Immutable snapshot of a source file.

    Attributes:
        path (Path): Where the document lives (its name feeds the header).
        text (str): Full decoded text, including a BOM if the file has one.
    """

    path: Path
    text: str

    @classmethod
    def from_path(cls, path: Path) -> SourceDocument:
        """Read ``path`` as UTF-8 without newline translation."""
        with path.open("r", encoding="utf-8", newline="") as fh:
            return cls(path=path, text=fh.read())

    @property
    def name(self) -> str:
        """The file name without directories."""
        return self.path.name

    @property
    def bom(self) -> str:
        """The byte order mark, or an empty string."""
        return UTF8_BOM if self.text.startswith(UTF8_BOM) else ""

    @property
    def newline(self) -> str:
        """The document's newline style (first terminator found)."""
        return detect_newline(self.text)

    def split(self) -> tuple[str, TriviaSequence, str]:
        """Return ``(bom, leading_trivia, body)``."""
        bom: str = self.bom
        trivia, end = lex_leading_trivia(self.text, len(bom))
        return bom, trivia, self.text[end:]

    @property
    def leading_trivia(self) -> TriviaSequence:
        """The leading trivia of the document."""
        return self.split()[1]

    def with_leading_trivia(self, trivia: TriviaSequence) -> SourceDocument:
        """Return a copy of this document whose leading trivia is ``trivia``."""
        bom, _, body = self.split()
        return replace(self, text=bom + trivia_to_text(trivia) + body)
