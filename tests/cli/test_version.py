# topmark:header:start
#
#   project      : HeaderFix
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: `version` command output and group help."""

from __future__ import annotations

from headerfix.constants import HEADERFIX_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == HEADERFIX_VERSION


def test_group_without_command_shows_help() -> None:
    result = run_cli(["--no-color"])

    assert_SUCCESS(result)
    assert "check" in result.output
    assert "render" in result.output
