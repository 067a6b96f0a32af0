# topmark:header:start
#
#   project      : HeaderFix
#   file         : config.py
#   file_relpath : src/headerfix/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix `config` command.

Dumps the effective configuration (defaults, discovered files, ``--config``
files and CLI overrides merged) as a ``[tool.headerfix]``-style TOML document.
The output can be saved as ``headerfix.toml``.
"""

from __future__ import annotations

from pathlib import Path

import click

from headerfix.cli.console import ClickConsole
from headerfix.cli.options import (
    CONTEXT_SETTINGS,
    build_config,
    common_config_options,
    common_file_options,
    common_header_options,
)
from headerfix.config import Config
from headerfix.config.io import to_toml


@click.command(
    name="config",
    help="Dump the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_header_options
@common_file_options
def config_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[Path, ...],
    no_config: bool,
    company_name: str | None,
    copyright_text: str | None,
    xml_header: bool | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> None:
    """Print the merged configuration.

    Args:
        paths (tuple[str, ...]): Paths whose ancestors are searched for config
            files (default: the current directory).
        config_paths (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip discovery.
        company_name (str | None): ``--company`` override.
        copyright_text (str | None): ``--copyright-text`` override.
        xml_header (bool | None): ``--xml-header/--no-xml-header`` override.
        include_patterns (tuple[str, ...]): ``--include`` patterns.
        exclude_patterns (tuple[str, ...]): ``--exclude`` patterns.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = build_config(
        input_paths=[Path(p) for p in paths] or [Path.cwd()],
        config_paths=config_paths,
        no_config=no_config,
        company_name=company_name,
        copyright_text=copyright_text,
        xml_header=xml_header,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
    )

    if console.verbosity > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(console.styled(f"# Sources: {sources}", dim=True))
    console.write(to_toml(config.to_toml_dict()))
