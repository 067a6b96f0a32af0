# topmark:header:start
#
#   project      : HeaderFix
#   file         : file_resolver.py
#   file_relpath : src/headerfix/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files HeaderFix should process.

Positional paths are expanded (directories recursively, globs relative to the
base directory), then filtered with the configured include and exclude patterns.
Patterns use ``.gitignore`` semantics and are matched against paths relative to
the base directory. The result is sorted and free of duplicates.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from headerfix.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headerfix.config import Config
    from headerfix.config.logging import HeaderfixLogger

logger: HeaderfixLogger = get_logger(__name__)

_GLOB_CHARS: frozenset[str] = frozenset("*?[")


def _glob(pattern: str, base: Path) -> list[Path]:
    """Return the files matching ``pattern``, relative to ``base`` unless absolute.

    ``Path.glob`` rejects absolute patterns, so those are matched from their anchor.
    """
    pattern_path = Path(pattern)
    if pattern_path.is_absolute():
        anchor = Path(pattern_path.anchor)
        base, pattern = anchor, pattern_path.relative_to(anchor).as_posix()
    return sorted(p for p in base.glob(pattern) if p.is_file())


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style path relative to ``base`` (absolute as a fallback)."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_paths(paths: Iterable[str | Path], base: Path) -> list[Path]:
    """Expand files, directories and glob patterns into candidate files.

    Missing paths are logged and skipped.

    Args:
        paths (Iterable[str | Path]): Positional inputs.
        base (Path): Directory relative inputs and globs are resolved against.
            Absolute globs are matched from the filesystem root.

    Returns:
        list[Path]: Candidate files (not yet filtered, possibly with duplicates).
    """
    out: list[Path] = []
    for raw in paths:
        text: str = str(raw)
        if any(c in _GLOB_CHARS for c in text) and not Path(text).exists():
            matches: list[Path] = _glob(text, base)
            if not matches:
                logger.warning("Pattern '%s' matched no files", text)
            out.extend(matches)
            continue

        p = Path(text)
        if not p.is_absolute():
            p = base / p
        if p.is_dir():
            out.extend(sorted(f for f in p.rglob("*") if f.is_file()))
        elif p.is_file():
            out.append(p)
        else:
            logger.warning("Path not found: %s", p)
    return out


def filter_paths(
    candidates: Iterable[Path],
    *,
    include_patterns: Iterable[str],
    exclude_patterns: Iterable[str],
    base: Path,
) -> list[Path]:
    """Keep candidates matching an include pattern and no exclude pattern.

    An empty include list keeps every candidate.

    Returns:
        list[Path]: Sorted, de-duplicated files.
    """
    include: list[str] = list(include_patterns)
    include_spec: PathSpec | None = (
        PathSpec.from_lines(GitWildMatchPattern, include) if include else None
    )
    exclude_spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(exclude_patterns))

    kept: dict[Path, None] = {}
    for path in candidates:
        rel: str = _rel_for_match(path, base)
        if include_spec is not None and not include_spec.match_file(rel):
            logger.trace("Not included: %s", rel)
            continue
        if exclude_spec.match_file(rel):
            logger.debug("Excluded: %s", rel)
            continue
        kept[path.resolve()] = None
    return sorted(kept)


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    base: Path | None = None,
) -> list[Path]:
    """Return the files to process for ``paths`` under ``config``'s filters.

    Args:
        paths (Iterable[str | Path]): Positional inputs (files, directories, globs).
        config (Config): Supplies include and exclude patterns.
        base (Path | None): Base directory; defaults to the current working directory.

    Returns:
        list[Path]: Sorted absolute file paths.
    """
    root: Path = base or Path.cwd()
    candidates: list[Path] = expand_paths(paths, root)
    files: list[Path] = filter_paths(
        candidates,
        include_patterns=config.include_patterns,
        exclude_patterns=config.exclude_patterns,
        base=root,
    )
    logger.debug("Resolved %d file(s) from %d candidate(s)", len(files), len(candidates))
    return files
