# topmark:header:start
#
#   project      : HeaderFix
#   file         : keys.py
#   file_relpath : src/headerfix/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for HeaderFix configuration.

These names are the external configuration API (``headerfix.toml`` and
``[tool.headerfix]`` in ``pyproject.toml``). Renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by HeaderFix configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "headerfix"

    # [header]
    SECTION_HEADER: Final[str] = "header"

    KEY_COMPANY_NAME: Final[str] = "company_name"
    KEY_COPYRIGHT_TEXT: Final[str] = "copyright_text"
    KEY_XML_HEADER: Final[str] = "xml_header"

    # [header.variables]
    SECTION_VARIABLES: Final[str] = "variables"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"


# Built-in variable that always resolves to the configured company name.
COMPANY_NAME_VARIABLE: Final[str] = "companyName"
