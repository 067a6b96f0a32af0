# topmark:header:start
#
#   project      : HeaderFix
#   file         : diff.py
#   file_relpath : src/headerfix/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorized rendering of unified diffs for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Sequence


def _render_line(line: str, *, color: bool) -> str:
    # Make CR/LF visible: header rewrites often differ only in line terminators.
    content: str = line.replace("\r", "\\r").replace("\n", "\\n")
    if not color or not content:
        return content
    if line.startswith(("+++", "---")):
        return chalk.bold.white(content)
    if line.startswith("@@"):
        return chalk.cyan(content)
    if line.startswith("-"):
        return chalk.bold.red(content)
    if line.startswith("+"):
        return chalk.bold.green(content)
    return chalk.gray(content)


def render_patch(
    patch: Sequence[str] | str,
    *,
    show_line_numbers: bool = False,
    color: bool = True,
) -> str:
    """Render a unified diff for display.

    Args:
        patch (Sequence[str] | str): The diff, as a list of lines or one string.
        show_line_numbers (bool): Prefix every line with a 4-digit line number.
        color (bool): Colorize with yachalk.

    Returns:
        str: The rendered diff, one output line per diff line.
    """
    lines: list[str] = patch.splitlines(keepends=True) if isinstance(patch, str) else list(patch)

    if show_line_numbers:
        return "".join(
            f"{i:04d}|{_render_line(line, color=color)}\n" for i, line in enumerate(lines, 1)
        )
    return "".join(f"{_render_line(line, color=color)}\n" for line in lines)
