# topmark:header:start
#
#   project      : HeaderFix
#   file         : fixer.py
#   file_relpath : src/headerfix/pipeline/fixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Apply the header engine to a single document through a host.

`transform` is host-agnostic: it asks the host for trivia, filename, settings and
newline style, runs the splicer and hands the new trivia back. `fix_document`
specializes it for `SourceDocument` and packages the before/after texts into a
`FixResult`.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from headerfix.config.logging import get_logger
from headerfix.core.errors import FixCancelledError
from headerfix.core.splicer import splice_header
from headerfix.pipeline.status import FixOutcome, HeaderStatus

if TYPE_CHECKING:
    import threading
    from pathlib import Path

    from headerfix.config.logging import HeaderfixLogger
    from headerfix.core.splicer import SpliceResult
    from headerfix.host.document import SourceDocument
    from headerfix.host.protocols import HeaderHost

logger: HeaderfixLogger = get_logger(__name__)

DocT = TypeVar("DocT")


def check_cancelled(cancel: threading.Event | None, what: object) -> None:
    """Raise `FixCancelledError` if ``cancel`` is set.

    Args:
        cancel (threading.Event | None): Cancellation token supplied by the host.
        what (object): The document about to be processed (for the message).

    Raises:
        FixCancelledError: When cancellation was requested.
    """
    if cancel is not None and cancel.is_set():
        raise FixCancelledError(f"Fix cancelled before processing {what}")


def transform(
    document: DocT,
    host: HeaderHost[DocT],
    *,
    cancel: threading.Event | None = None,
) -> tuple[DocT, SpliceResult]:
    """Run the header engine on ``document``.

    Args:
        document (DocT): The document to fix.
        host (HeaderHost[DocT]): Host providing trivia, settings and reattachment.
        cancel (threading.Event | None): Checked once, before any work is done.

    Returns:
        tuple[DocT, SpliceResult]: The new document and the splice details.
    """
    check_cancelled(cancel, document)

    newline: str = host.get_newline(document)
    spliced: SpliceResult = splice_header(
        host.get_leading_trivia(document),
        host.get_filename(document),
        host.get_settings(document),
        newline=newline,
        separator=newline,
    )
    return host.with_leading_trivia(document, spliced.trivia), spliced


@dataclass(frozen=True, slots=True)
class FixResult:
    """Outcome of fixing one file.

    Attributes:
        path (Path): The file.
        status (HeaderStatus): Whether the file had a header before the fix.
        boundary (int): Trivia index where the old header ended (``0`` if missing).
        original_text (str): Text before the fix.
        updated_text (str): Text after the fix.
    """

    path: Path
    status: HeaderStatus
    boundary: int
    original_text: str
    updated_text: str

    @property
    def changed(self) -> bool:
        """True when the fix modifies the file."""
        return self.original_text != self.updated_text

    @property
    def outcome(self) -> FixOutcome:
        """Classify the fix for reporting."""
        if not self.changed:
            return FixOutcome.UNCHANGED
        if self.status == HeaderStatus.MISSING:
            return FixOutcome.INSERTED
        return FixOutcome.REPLACED

    def diff(self) -> str:
        """Return a unified diff from the original to the updated text.

        Lines keep their own terminators, so CRLF files produce CRLF diff lines.
        """
        return "".join(
            difflib.unified_diff(
                self.original_text.splitlines(keepends=True),
                self.updated_text.splitlines(keepends=True),
                fromfile=f"{self.path} (current)",
                tofile=f"{self.path} (updated)",
                n=3,
            )
        )


def fix_document(
    document: SourceDocument,
    host: HeaderHost[SourceDocument],
    *,
    cancel: threading.Event | None = None,
) -> FixResult:
    """Fix the header of one source document.

    Args:
        document (SourceDocument): The document to fix.
        host (HeaderHost[SourceDocument]): The host to call through.
        cancel (threading.Event | None): Cancellation token, checked before starting.

    Returns:
        FixResult: The before/after state of the document.
    """
    updated, spliced = transform(document, host, cancel=cancel)

    result = FixResult(
        path=document.path,
        status=HeaderStatus.PRESENT if spliced.scan.present else HeaderStatus.MISSING,
        boundary=spliced.scan.boundary,
        original_text=document.text,
        updated_text=updated.text,
    )
    logger.info("%s: %s (%s)", document.path, result.outcome.value, result.status.value)
    return result


def write_result(result: FixResult) -> bool:
    """Write ``result.updated_text`` back to disk when the fix changed the file.

    The text is written as UTF-8 without newline translation.

    Returns:
        bool: True if the file was written.
    """
    if not result.changed:
        return False
    with result.path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(result.updated_text)
    logger.debug("Wrote %s", result.path)
    return True
