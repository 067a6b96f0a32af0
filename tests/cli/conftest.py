# topmark:header:start
#
#   project      : HeaderFix
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running HeaderFix in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so relative paths, globs and config discovery
resolve against the temporary project and never against the repository.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from headerfix.cli.exit_codes import ExitCode
from headerfix.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

# Marks the test project as a config root so discovery never leaves tmp_path.
ROOT_CONFIG: str = 'root = true\n[header]\ncompany_name = "Acme"\n'


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "--apply", "."]``.

    Returns:
        Result: The `click.testing.Result` of the run.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert ``result`` exited with ``code``, showing the output otherwise."""
    assert result.exit_code == code, (
        f"expected exit {int(code)}, got {result.exit_code}\n"
        f"output:\n{result.output}\nexception: {result.exception!r}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert the command succeeded."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_WOULD_CHANGE(result: Result) -> None:  # noqa: N802
    """Assert a dry run reported pending changes (and did not crash)."""
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert_exit(result, ExitCode.WOULD_CHANGE)
