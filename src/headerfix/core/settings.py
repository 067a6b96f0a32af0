# topmark:header:start
#
#   project      : HeaderFix
#   file         : settings.py
#   file_relpath : src/headerfix/core/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved header settings consumed by the header renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HeaderSettings:
    """Immutable, fully resolved header settings.

    Values are used verbatim: an empty template or company name renders as-is.

    Attributes:
        copyright_template (str): Copyright text. Each line (split on ``\\n``) becomes
            one ``//`` comment line.
        use_structured_wrap (bool): Wrap the copyright lines in a
            ``<copyright file="..." company="...">`` block.
        company_name (str): Company written into the structured block.
    """

    copyright_template: str
    use_structured_wrap: bool = True
    company_name: str = ""
