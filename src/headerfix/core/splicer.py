# topmark:header:start
#
#   project      : HeaderFix
#   file         : splicer.py
#   file_relpath : src/headerfix/core/splicer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Replace (or insert) the file header in a leading trivia sequence.

The output is always ``rendered header + 2 x END_OF_LINE + sequence[boundary:]``,
where ``boundary`` is ``0`` when the sequence carries no header. Everything from
the boundary onward is reused as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from headerfix.config.logging import get_logger
from headerfix.core.renderer import render_header_trivia
from headerfix.core.scanner import scan_header
from headerfix.core.trivia import Trivia, TriviaSequence

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headerfix.config.logging import HeaderfixLogger
    from headerfix.core.scanner import HeaderScan
    from headerfix.core.settings import HeaderSettings

logger: HeaderfixLogger = get_logger(__name__)

# Line terminator used for the separator lines when the caller does not pick one.
DEFAULT_SEPARATOR: str = "\r\n"


@dataclass(frozen=True, slots=True)
class SpliceResult:
    """Result of splicing a new header into a trivia sequence.

    Attributes:
        trivia (TriviaSequence): The new leading trivia.
        scan (HeaderScan): Header detection outcome for the input sequence.
        header_length (int): Number of leading trivia in ``trivia`` that belong to the
            rendered header, separator lines included.
    """

    trivia: TriviaSequence
    scan: HeaderScan
    header_length: int


def splice_header(
    sequence: Sequence[Trivia],
    filename: str,
    settings: HeaderSettings,
    *,
    newline: str = "\n",
    separator: str = DEFAULT_SEPARATOR,
) -> SpliceResult:
    """Render a header for ``filename`` and splice it in front of the preserved trivia.

    Args:
        sequence (Sequence[Trivia]): Original leading trivia. Not modified.
        filename (str): Name for the structured header.
        settings (HeaderSettings): Resolved header settings.
        newline (str): Terminator between rendered header lines.
        separator (str): Terminator used for the two lines that follow the header.

    Returns:
        SpliceResult: The new trivia plus the detection outcome.
    """
    scan: HeaderScan = scan_header(sequence)

    rendered: TriviaSequence = (
        *render_header_trivia(filename, settings, newline=newline),
        Trivia.end_of_line(separator),
        Trivia.end_of_line(separator),
    )
    remainder: TriviaSequence = tuple(sequence[scan.boundary :])

    logger.debug(
        "Splicing header for %s: present=%s, boundary=%d, preserved=%d trivia",
        filename,
        scan.present,
        scan.boundary,
        len(remainder),
    )
    return SpliceResult(trivia=rendered + remainder, scan=scan, header_length=len(rendered))


def apply_header(
    sequence: Sequence[Trivia],
    filename: str,
    settings: HeaderSettings,
    *,
    newline: str = "\n",
    separator: str = DEFAULT_SEPARATOR,
) -> TriviaSequence:
    """Return ``sequence`` with its header replaced by the canonical one.

    See `splice_header` for the arguments.

    Returns:
        TriviaSequence: The new leading trivia.
    """
    return splice_header(
        sequence,
        filename,
        settings,
        newline=newline,
        separator=separator,
    ).trivia
