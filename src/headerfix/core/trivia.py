# topmark:header:start
#
#   project      : HeaderFix
#   file         : trivia.py
#   file_relpath : src/headerfix/core/trivia.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leading trivia model for the header engine.

Trivia are the non-semantic units (comments, horizontal whitespace, line
terminators, directives, ...) that precede the first substantive token of a
source file. The engine only distinguishes four kinds; anything it does not
understand is folded into `TriviaKind.OTHER`.

A trivia sequence is a plain ``tuple`` of `Trivia` so that it can never be
mutated in place: every engine operation returns a new tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class TriviaKind(Enum):
    """Closed set of trivia kinds recognized by the header engine.

    Members:
        LINE_COMMENT: A single-line ``//`` comment (without its line terminator).
        WHITESPACE: A run of horizontal whitespace.
        END_OF_LINE: A single line terminator (``\\r\\n``, ``\\n`` or ``\\r``).
        OTHER: Any other trivia (block comments, doc comments, directives, ...).
    """

    LINE_COMMENT = "line_comment"
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Trivia:
    """A single leading trivia unit.

    Attributes:
        kind (TriviaKind): Classification of the unit.
        text (str): The literal source text of the unit.
    """

    kind: TriviaKind
    text: str

    @classmethod
    def line_comment(cls, text: str) -> Trivia:
        """Return a `LINE_COMMENT` trivia for ``text``."""
        return cls(TriviaKind.LINE_COMMENT, text)

    @classmethod
    def whitespace(cls, text: str) -> Trivia:
        """Return a `WHITESPACE` trivia for ``text``."""
        return cls(TriviaKind.WHITESPACE, text)

    @classmethod
    def end_of_line(cls, text: str = "\r\n") -> Trivia:
        """Return an `END_OF_LINE` trivia (CRLF unless specified)."""
        return cls(TriviaKind.END_OF_LINE, text)

    @classmethod
    def other(cls, text: str) -> Trivia:
        """Return an `OTHER` trivia for ``text``."""
        return cls(TriviaKind.OTHER, text)


# Immutable, ordered leading trivia of a document.
TriviaSequence = tuple[Trivia, ...]


def trivia_to_text(sequence: Iterable[Trivia]) -> str:
    """Concatenate the literal text of a trivia sequence.

    Args:
        sequence (Iterable[Trivia]): The trivia to serialize.

    Returns:
        str: The exact source text represented by ``sequence``.
    """
    return "".join(t.text for t in sequence)


def kinds_of(sequence: Iterable[Trivia]) -> tuple[TriviaKind, ...]:
    """Return the kinds of ``sequence`` (handy for logging and tests)."""
    return tuple(t.kind for t in sequence)
