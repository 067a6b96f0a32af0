# topmark:header:start
#
#   project      : HeaderFix
#   file         : batch.py
#   file_relpath : src/headerfix/pipeline/batch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fix many files at once.

Each file is loaded and fixed independently on a worker thread. The header
engine is pure, so results do not depend on scheduling: the returned list is in
input order and equals what a sequential run would produce.

Failure handling:
    - Unreadable or undecodable files become `FixFailure` entries; the batch goes on.
    - `HeaderContractError` (a host bug) aborts the batch.
    - Cancellation aborts the batch with `FixCancelledError`, whose ``completed``
      attribute carries the results that were already finished.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TYPE_CHECKING

from headerfix.config.logging import get_logger
from headerfix.core.errors import FixCancelledError
from headerfix.host.document import SourceDocument
from headerfix.pipeline.fixer import check_cancelled, fix_document
from headerfix.pipeline.status import FixOutcome

if TYPE_CHECKING:
    import threading
    from collections.abc import Iterable
    from pathlib import Path

    from headerfix.config.logging import HeaderfixLogger
    from headerfix.host.protocols import HeaderHost
    from headerfix.pipeline.fixer import FixResult

logger: HeaderfixLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FixFailure:
    """A file that could not be fixed.

    Attributes:
        path (Path): The file.
        error (Exception): Why it failed.
    """

    path: Path
    error: Exception

    @property
    def changed(self) -> bool:
        """Failures never change a file."""
        return False

    @property
    def outcome(self) -> FixOutcome:
        """Always `FixOutcome.FAILED`."""
        return FixOutcome.FAILED


def dedupe_paths(paths: Iterable[Path]) -> list[Path]:
    """Drop paths that resolve to a file already seen (first occurrence wins)."""
    seen: set[Path] = set()
    out: list[Path] = []
    for p in paths:
        key: Path = p.resolve()
        if key in seen:
            logger.debug("Skipping duplicate path %s", p)
            continue
        seen.add(key)
        out.append(p)
    return out


def fix_path(
    path: Path,
    host: HeaderHost[SourceDocument],
    *,
    cancel: threading.Event | None = None,
) -> FixResult | FixFailure:
    """Load ``path`` and fix it; I/O and decoding errors become a `FixFailure`."""
    check_cancelled(cancel, path)
    try:
        document: SourceDocument = SourceDocument.from_path(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        return FixFailure(path=path, error=exc)
    return fix_document(document, host)


def fix_all(
    paths: Iterable[Path],
    host: HeaderHost[SourceDocument],
    *,
    max_workers: int | None = None,
    cancel: threading.Event | None = None,
) -> list[FixResult | FixFailure]:
    """Fix every file in ``paths`` concurrently.

    Args:
        paths (Iterable[Path]): Files to fix; duplicates are processed once.
        host (HeaderHost[SourceDocument]): The host shared by all workers.
        max_workers (int | None): Worker thread count (``None``: executor default).
        cancel (threading.Event | None): Checked before each file is started.

    Returns:
        list[FixResult | FixFailure]: One entry per unique path, in input order.

    Raises:
        FixCancelledError: When ``cancel`` is set before all files were processed.
    """
    unique: list[Path] = dedupe_paths(paths)
    if not unique:
        return []

    slots: list[FixResult | FixFailure | None] = [None] * len(unique)
    logger.debug("Fixing %d file(s) with max_workers=%s", len(unique), max_workers)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="headerfix") as pool:
        futures: dict[Future[FixResult | FixFailure], int] = {
            pool.submit(fix_path, p, host, cancel=cancel): i for i, p in enumerate(unique)
        }
        try:
            for fut in as_completed(futures):
                slots[futures[fut]] = fut.result()
        except FixCancelledError as exc:
            for fut in futures:
                fut.cancel()
            completed: tuple[object, ...] = tuple(s for s in slots if s is not None)
            logger.warning("Batch cancelled after %d of %d file(s)", len(completed), len(unique))
            raise FixCancelledError(str(exc), completed=completed) from exc
        except BaseException:
            for fut in futures:
                fut.cancel()
            raise

    return [s for s in slots if s is not None]
