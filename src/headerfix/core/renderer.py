# topmark:header:start
#
#   project      : HeaderFix
#   file         : renderer.py
#   file_relpath : src/headerfix/core/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the canonical file header for a filename and a set of header settings.

Two shapes are produced:

Plain (``use_structured_wrap=False``)::

    // Copyright (c) Acme. All rights reserved.

Structured (``use_structured_wrap=True``)::

    // <copyright file="Foo.cs" company="Acme">
    // Copyright (c) Acme. All rights reserved.
    // </copyright>

The rendered text never ends with a line terminator; the splicer appends the
separator lines.
"""

from __future__ import annotations

import re

from headerfix.core.errors import HeaderContractError
from headerfix.core.lexer import parse_trivia_text
from headerfix.core.settings import HeaderSettings
from headerfix.core.trivia import TriviaSequence

COMMENT_PREFIX: str = "// "

# Any line terminator inside a template ends a comment line.
_LINE_BREAK: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


def render_copyright_block(copyright_template: str, *, newline: str = "\n") -> str:
    """Turn every line of ``copyright_template`` into a ``//`` comment line.

    Args:
        copyright_template (str): Template text; ``\\r\\n``, ``\\r`` and ``\\n`` all
            separate lines.
        newline (str): Terminator placed between the rendered comment lines.

    Returns:
        str: The comment block, without a trailing terminator.
    """
    return newline.join(COMMENT_PREFIX + line for line in _LINE_BREAK.split(copyright_template))


def wrap_in_copyright_element(
    copyright_block: str,
    filename: str,
    company_name: str,
    *,
    newline: str = "\n",
) -> str:
    """Wrap a rendered copyright block in the structured ``<copyright>`` element."""
    return newline.join(
        (
            f'{COMMENT_PREFIX}<copyright file="{filename}" company="{company_name}">',
            copyright_block,
            f"{COMMENT_PREFIX}</copyright>",
        )
    )


def _check_preconditions(filename: object, settings: object) -> None:
    if filename is None:
        raise HeaderContractError("A filename is required to render a file header.")
    if not isinstance(filename, str):
        raise HeaderContractError(f"filename must be a str, got {type(filename).__name__}.")
    if settings is None:
        raise HeaderContractError("Header settings are required to render a file header.")
    if not isinstance(settings, HeaderSettings):
        raise HeaderContractError(
            f"settings must be HeaderSettings, got {type(settings).__name__}."
        )


def render_header(filename: str, settings: HeaderSettings, *, newline: str = "\n") -> str:
    """Render the canonical header text for ``filename``.

    Args:
        filename (str): Name written into the structured header (usually the basename).
        settings (HeaderSettings): Resolved header settings.
        newline (str): Terminator placed between header lines.

    Returns:
        str: The header text, without a trailing terminator.

    Raises:
        HeaderContractError: If ``filename`` or ``settings`` is missing or of the
            wrong type.
    """
    _check_preconditions(filename, settings)

    copyright_block: str = render_copyright_block(settings.copyright_template, newline=newline)
    if not settings.use_structured_wrap:
        return copyright_block
    return wrap_in_copyright_element(
        copyright_block,
        filename,
        settings.company_name,
        newline=newline,
    )


def render_header_trivia(
    filename: str,
    settings: HeaderSettings,
    *,
    newline: str = "\n",
) -> TriviaSequence:
    """Render the header for ``filename`` as a trivia sequence (no separator lines)."""
    return parse_trivia_text(render_header(filename, settings, newline=newline))
