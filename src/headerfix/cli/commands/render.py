# topmark:header:start
#
#   project      : HeaderFix
#   file         : render.py
#   file_relpath : src/headerfix/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix `render` command.

Prints the header HeaderFix would write for a given file name, using the
configuration discovered from the current directory (or ``--config``) and any
header overrides on the command line. Nothing is read from or written to disk
apart from configuration files.
"""

from __future__ import annotations

from pathlib import Path

import click

from headerfix.cli.console import ClickConsole
from headerfix.cli.errors import HeaderfixPipelineError
from headerfix.cli.options import (
    CONTEXT_SETTINGS,
    build_config,
    common_config_options,
    common_header_options,
)
from headerfix.config import Config
from headerfix.core.errors import HeaderContractError
from headerfix.core.renderer import render_header

_NEWLINES: dict[str, str] = {"lf": "\n", "crlf": "\r\n"}


@click.command(
    name="render",
    help="Print the header that would be written for FILENAME.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  headerfix render Foo.cs --company Acme --copyright-text "Copyright (c) Acme"
""",
)
@click.argument("filename", type=str)
@common_config_options
@common_header_options
@click.option(
    "--newline",
    "newline_name",
    type=click.Choice(sorted(_NEWLINES), case_sensitive=False),
    default="lf",
    show_default=True,
    help="Line terminator between header lines.",
)
def render_command(
    *,
    filename: str,
    config_paths: tuple[Path, ...],
    no_config: bool,
    company_name: str | None,
    copyright_text: str | None,
    xml_header: bool | None,
    newline_name: str,
) -> None:
    """Render the header for ``filename`` to stdout."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = build_config(
        input_paths=[Path.cwd()],
        config_paths=config_paths,
        no_config=no_config,
        company_name=company_name,
        copyright_text=copyright_text,
        xml_header=xml_header,
    )
    newline: str = _NEWLINES[newline_name.lower()]
    try:
        header: str = render_header(
            Path(filename).name, config.header_settings(), newline=newline
        )
    except HeaderContractError as exc:
        raise HeaderfixPipelineError(str(exc)) from exc

    console.write(header + newline)
