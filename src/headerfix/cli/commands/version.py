# topmark:header:start
#
#   project      : HeaderFix
#   file         : version.py
#   file_relpath : src/headerfix/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix `version` command.

Prints the HeaderFix version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from headerfix.cli.console import ClickConsole
from headerfix.constants import HEADERFIX_VERSION


@click.command(
    name="version",
    help="Show the current version of HeaderFix.",
)
def version_command() -> None:
    """Show the current version of HeaderFix."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if console.verbosity > 0:
        console.print(console.styled("HeaderFix version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(HEADERFIX_VERSION, bold=True)}")
    else:
        console.write(console.styled(HEADERFIX_VERSION, bold=True) + "\n")
