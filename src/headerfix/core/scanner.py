# topmark:header:start
#
#   project      : HeaderFix
#   file         : scanner.py
#   file_relpath : src/headerfix/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the end of an existing file header in a leading trivia sequence.

A header is a block of ``//`` line comments terminated by a blank line. The scan
is a two-state machine over the trivia sequence:

| state           | LINE_COMMENT    | WHITESPACE | END_OF_LINE              | OTHER |
|-----------------|-----------------|------------|--------------------------|-------|
| `IN_LINE`       | → `IN_LINE`     | stay       | → `ON_BLANK_LINE`        | stop  |
| `ON_BLANK_LINE` | → `IN_LINE`     | stay       | consume, stop            | stop  |

`ON_BLANK_LINE` means "one line terminator seen since the last comment". A second
terminator in that state ends the header *after* that terminator. `OTHER` trivia
end the header *before* themselves. Running off the end of the sequence consumes
everything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from headerfix.config.logging import TRACE_LEVEL, get_logger
from headerfix.core.trivia import TriviaKind, kinds_of

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headerfix.config.logging import HeaderfixLogger
    from headerfix.core.trivia import Trivia

logger: HeaderfixLogger = get_logger(__name__)


class ScanState(Enum):
    """States of the header boundary scanner."""

    IN_LINE = "in_line"
    ON_BLANK_LINE = "on_blank_line"


@dataclass(frozen=True, slots=True)
class HeaderScan:
    """Outcome of scanning a leading trivia sequence.

    Attributes:
        present (bool): True when the sequence starts with a line comment.
        boundary (int): Index of the first trivia to preserve. Always ``0`` when
            ``present`` is False.
    """

    present: bool
    boundary: int


def has_header(sequence: Sequence[Trivia]) -> bool:
    """Return True if ``sequence`` starts with a line comment."""
    return bool(sequence) and sequence[0].kind is TriviaKind.LINE_COMMENT


def find_header_boundary(sequence: Sequence[Trivia]) -> int:
    """Return the index where the header region of ``sequence`` ends.

    This runs the raw state machine from index 0 and does not check whether a
    header is present at all; use `scan_header` for that.

    Args:
        sequence (Sequence[Trivia]): Leading trivia of a document.

    Returns:
        int: Boundary index in ``[0, len(sequence)]``. ``sequence[boundary:]`` is the
        part that must be preserved.
    """
    cursor: int = 0
    state: ScanState = ScanState.IN_LINE

    while cursor < len(sequence):
        kind: TriviaKind = sequence[cursor].kind

        if kind is TriviaKind.LINE_COMMENT:
            cursor += 1
            state = ScanState.IN_LINE
        elif kind is TriviaKind.WHITESPACE:
            cursor += 1
        elif kind is TriviaKind.END_OF_LINE:
            cursor += 1
            if state is ScanState.ON_BLANK_LINE:
                break
            state = ScanState.ON_BLANK_LINE
        else:
            break

    if logger.isEnabledFor(TRACE_LEVEL):
        logger.trace("Header boundary %d for trivia kinds %s", cursor, kinds_of(sequence))
    return cursor


def scan_header(sequence: Sequence[Trivia]) -> HeaderScan:
    """Decide whether ``sequence`` carries a header and where it ends.

    Args:
        sequence (Sequence[Trivia]): Leading trivia of a document.

    Returns:
        HeaderScan: ``present=False, boundary=0`` when the first trivia is not a line
        comment, otherwise the boundary found by `find_header_boundary`.
    """
    if not has_header(sequence):
        logger.debug("No header: leading trivia does not start with a line comment")
        return HeaderScan(present=False, boundary=0)
    return HeaderScan(present=True, boundary=find_header_boundary(sequence))
