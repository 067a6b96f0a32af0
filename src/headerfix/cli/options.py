# topmark:header:start
#
#   project      : HeaderFix
#   file         : options.py
#   file_relpath : src/headerfix/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution helpers.

Commands stay thin: they stack these decorators and hand the parsed values to
`build_config` (config options) or read the shared state that the group stored
on ``ctx.obj`` (verbosity, color).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from headerfix.cli.errors import HeaderfixConfigError, HeaderfixUsageError
from headerfix.config import Config, MutableConfig
from headerfix.config.logging import get_logger
from headerfix.core.errors import ConfigError

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` when quiet, otherwise the number of ``-v`` flags.

    Raises:
        HeaderfixUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HeaderfixUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def resolve_color(no_color: bool) -> bool:
    """Return True if colored output should be emitted.

    ``--no-color`` and the ``NO_COLOR`` environment variable disable color; otherwise
    color is used when stdout is a terminal.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return False
    return click.get_text_stream("stdout").isatty()


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress per-file program output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable colored output.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Extra config file merged after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore headerfix.toml / pyproject.toml discovery.",
    )(f)
    return f


def common_header_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options that override the header settings."""
    f = click.option(
        "--company",
        "company_name",
        default=None,
        help="Company name for the structured header and {companyName}.",
    )(f)
    f = click.option(
        "--copyright-text",
        "copyright_text",
        default=None,
        help=r"Copyright text; use '\n' for line breaks.",
    )(f)
    f = click.option(
        "--xml-header/--no-xml-header",
        "xml_header",
        default=None,
        help="Wrap the copyright text in a <copyright> block (default from config).",
    )(f)
    return f


def common_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--include`` and ``--exclude`` pattern options."""
    f = click.option(
        "--include",
        "include_patterns",
        multiple=True,
        help="Gitignore-style pattern a file must match (repeatable; replaces config).",
    )(f)
    f = click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        help="Gitignore-style pattern excluding files (repeatable; added to config).",
    )(f)
    return f


def build_config(
    *,
    input_paths: list[Path],
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
    company_name: str | None = None,
    copyright_text: str | None = None,
    xml_header: bool | None = None,
    include_patterns: tuple[str, ...] = (),
    exclude_patterns: tuple[str, ...] = (),
) -> Config:
    """Discover, merge and freeze the effective configuration.

    CLI values override configuration files. ``--copyright-text`` accepts a literal
    ``\\n`` escape for multi-line text.

    Raises:
        HeaderfixConfigError: If a configuration file is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            input_paths=input_paths,
            extra_config_files=config_paths,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise HeaderfixConfigError(str(exc)) from exc

    overrides = MutableConfig(
        company_name=company_name,
        copyright_text=copyright_text.replace("\\n", "\n") if copyright_text else copyright_text,
        xml_header=xml_header,
        include_patterns=list(include_patterns) if include_patterns else None,
        config_files=["<cli>"],
    )
    draft = draft.merge_with(overrides)
    if exclude_patterns:
        draft.exclude_patterns = [*(draft.exclude_patterns or []), *exclude_patterns]

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
