# topmark:header:start
#
#   project      : HeaderFix
#   file         : lexer.py
#   file_relpath : src/headerfix/core/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenize the leading trivia of C-style source text.

The lexer recognizes just enough of the C# / C-family trivia grammar to feed the
header scanner:

- ``//`` comments up to the line terminator (``///`` documentation comments are
  reported as `TriviaKind.OTHER`, ``////`` banners are ordinary line comments);
- runs of spaces, tabs, form feeds and vertical tabs;
- ``\\r\\n``, ``\\n`` and ``\\r`` line terminators, one unit each;
- ``/* ... */`` block comments and preprocessor directives (``#`` as the first
  non-blank character of a line), both as `TriviaKind.OTHER`.

Anything else is the first substantive token and ends the leading trivia.
"""

from __future__ import annotations

from headerfix.core.trivia import Trivia, TriviaSequence

HORIZONTAL_WHITESPACE: frozenset[str] = frozenset(" \t\f\v")
LINE_BREAK_CHARS: str = "\r\n"


def _line_end(text: str, pos: int) -> int:
    """Return the index of the next line terminator at or after ``pos`` (or ``len(text)``)."""
    end: int = pos
    while end < len(text) and text[end] not in LINE_BREAK_CHARS:
        end += 1
    return end


def lex_leading_trivia(text: str, start: int = 0) -> tuple[TriviaSequence, int]:
    """Split the leading trivia off ``text``.

    Args:
        text (str): Source text (without a byte order mark).
        start (int): Offset to start lexing from.

    Returns:
        tuple[TriviaSequence, int]: The trivia found and the offset of the first
        substantive character (``len(text)`` if the text is all trivia).
    """
    out: list[Trivia] = []
    pos: int = start
    # True while only whitespace has been seen since the last line terminator.
    at_line_start: bool = True

    while pos < len(text):
        ch: str = text[pos]

        if text.startswith("\r\n", pos):
            out.append(Trivia.end_of_line("\r\n"))
            pos += 2
            at_line_start = True
        elif ch in LINE_BREAK_CHARS:
            out.append(Trivia.end_of_line(ch))
            pos += 1
            at_line_start = True
        elif ch in HORIZONTAL_WHITESPACE:
            end: int = pos
            while end < len(text) and text[end] in HORIZONTAL_WHITESPACE:
                end += 1
            out.append(Trivia.whitespace(text[pos:end]))
            pos = end
        elif text.startswith("//", pos):
            end = _line_end(text, pos)
            comment: str = text[pos:end]
            if comment.startswith("///") and not comment.startswith("////"):
                out.append(Trivia.other(comment))
            else:
                out.append(Trivia.line_comment(comment))
            pos = end
            at_line_start = False
        elif text.startswith("/*", pos):
            close: int = text.find("*/", pos + 2)
            end = len(text) if close < 0 else close + 2
            out.append(Trivia.other(text[pos:end]))
            pos = end
            at_line_start = False
        elif ch == "#" and at_line_start:
            end = _line_end(text, pos)
            out.append(Trivia.other(text[pos:end]))
            pos = end
            at_line_start = False
        else:
            break

    return tuple(out), pos


def parse_trivia_text(text: str) -> TriviaSequence:
    """Tokenize a text that is expected to consist of trivia only.

    Any trailing text that is not trivia is kept as one `TriviaKind.OTHER` unit, so
    ``trivia_to_text(parse_trivia_text(s)) == s`` always holds.

    Args:
        text (str): Trivia text, e.g. a rendered header.

    Returns:
        TriviaSequence: The tokenized trivia.
    """
    trivia, end = lex_leading_trivia(text)
    if end < len(text):
        trivia = (*trivia, Trivia.other(text[end:]))
    return trivia
