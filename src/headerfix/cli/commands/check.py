# topmark:header:start
#
#   project      : HeaderFix
#   file         : check.py
#   file_relpath : src/headerfix/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix `check` command (dry run by default, ``--apply`` to write).

Every selected file gets the canonical header: an existing leading ``//``
comment block is replaced, a missing one is inserted. Without ``--apply`` the
command only reports what would change and exits with 2 if anything would.

Examples:
  Preview which files would change:

    $ headerfix check src

  Rewrite headers and show what changed:

    $ headerfix check --apply --diff src
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path

import click

from headerfix.cli.console import ClickConsole
from headerfix.cli.errors import HeaderfixFileNotFoundError, HeaderfixPipelineError
from headerfix.cli.exit_codes import ExitCode
from headerfix.cli.options import (
    CONTEXT_SETTINGS,
    build_config,
    common_config_options,
    common_file_options,
    common_header_options,
)
from headerfix.config import Config
from headerfix.config.logging import get_logger
from headerfix.core.errors import HeaderContractError
from headerfix.file_resolver import resolve_file_list
from headerfix.host.filesystem import FileHeaderHost
from headerfix.pipeline.batch import FixFailure, fix_all
from headerfix.pipeline.fixer import FixResult, write_result
from headerfix.pipeline.status import FixOutcome
from headerfix.utils.diff import render_patch

logger = get_logger(__name__)


def _check_inputs_exist(paths: tuple[str, ...]) -> None:
    """Raise if a literal (non-glob) input path does not exist."""
    for raw in paths:
        if any(c in raw for c in "*?[") or Path(raw).exists():
            continue
        raise HeaderfixFileNotFoundError(f"Path does not exist: {raw}")


def _exit_code_for_failure(failure: FixFailure) -> ExitCode:
    if isinstance(failure.error, UnicodeDecodeError):
        return ExitCode.ENCODING_ERROR
    if isinstance(failure.error, FileNotFoundError):
        return ExitCode.FILE_NOT_FOUND
    return ExitCode.IO_ERROR


_DRY_RUN_LABELS: dict[FixOutcome, str] = {
    FixOutcome.INSERTED: "header would be inserted",
    FixOutcome.REPLACED: "header would be replaced",
}


def _outcome_label(outcome: FixOutcome, *, applied: bool, console: ClickConsole) -> str:
    text: str = outcome.value if applied else _DRY_RUN_LABELS.get(outcome, outcome.value)
    return outcome.colored(text) if console.enable_color else text


@click.command(
    name="check",
    help="Check file headers (dry run). Use --apply to insert or replace them.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry run)
  headerfix check src

  # Apply: rewrite headers in place
  headerfix check --apply src
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_header_options
@common_file_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", "show_diff", is_flag=True, help="Show unified diffs of the changes.")
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show outcome counts instead of per-file details.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of worker threads (default: Python's executor default).",
)
def check_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[Path, ...],
    no_config: bool,
    company_name: str | None,
    copyright_text: str | None,
    xml_header: bool | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    apply_changes: bool,
    show_diff: bool,
    summary_mode: bool,
    workers: int | None,
) -> None:
    """Run the header check (and optionally apply the fixes).

    Args:
        paths (tuple[str, ...]): Files, directories or glob patterns.
        config_paths (tuple[Path, ...]): Extra config files (``--config``).
        no_config (bool): Skip config discovery.
        company_name (str | None): ``--company`` override.
        copyright_text (str | None): ``--copyright-text`` override.
        xml_header (bool | None): ``--xml-header/--no-xml-header`` override.
        include_patterns (tuple[str, ...]): ``--include`` patterns.
        exclude_patterns (tuple[str, ...]): ``--exclude`` patterns.
        apply_changes (bool): Write changes to disk.
        show_diff (bool): Print unified diffs.
        summary_mode (bool): Print outcome counts instead of per-file lines.
        workers (int | None): Worker thread count for the batch fixer.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if not paths:
        console.print(console.styled("No paths given; nothing to do.", fg="blue"))
        ctx.exit(ExitCode.SUCCESS)

    _check_inputs_exist(paths)

    config: Config = build_config(
        input_paths=[Path(p) for p in paths],
        config_paths=config_paths,
        no_config=no_config,
        company_name=company_name,
        copyright_text=copyright_text,
        xml_header=xml_header,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    files: list[Path] = resolve_file_list(paths, config)
    if not files:
        console.print(console.styled("No files to process.", fg="blue"))
        ctx.exit(ExitCode.SUCCESS)

    host: FileHeaderHost = FileHeaderHost.from_config(config)
    try:
        results: list[FixResult | FixFailure] = fix_all(files, host, max_workers=workers)
    except HeaderContractError as exc:
        raise HeaderfixPipelineError(str(exc)) from exc

    error_code: ExitCode | None = None
    would_change: bool = False
    counts: Counter[FixOutcome] = Counter()

    for result in results:
        if isinstance(result, FixFailure):
            console.error(f"{result.path}: {result.error}")
            error_code = error_code or _exit_code_for_failure(result)
            counts[FixOutcome.FAILED] += 1
            continue

        outcome: FixOutcome = result.outcome
        if apply_changes and result.changed:
            try:
                write_result(result)
            except OSError as exc:
                logger.error("Cannot write %s: %s", result.path, exc)
                console.error(f"{result.path}: cannot write: {exc}")
                error_code = error_code or ExitCode.IO_ERROR
                counts[FixOutcome.FAILED] += 1
                continue
        elif result.changed:
            would_change = True

        counts[outcome] += 1
        if not summary_mode and (result.changed or console.verbosity > 0):
            label: str = _outcome_label(outcome, applied=apply_changes, console=console)
            console.print(f"{result.path}: {label}")
        if show_diff and result.changed:
            console.write(render_patch(result.diff(), color=console.enable_color))

    if summary_mode:
        for outcome in FixOutcome:
            if counts[outcome]:
                label = outcome.colored() if console.enable_color else outcome.value
                console.print(f"{label}: {counts[outcome]}")

    if error_code is not None:
        ctx.exit(error_code)
    if would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)
