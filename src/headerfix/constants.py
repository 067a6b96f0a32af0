# topmark:header:start
#
#   project      : HeaderFix
#   file         : constants.py
#   file_relpath : src/headerfix/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HEADERFIX_VERSION: str = get_version("headerfix")

PYPROJECT_TOML_NAME: str = "pyproject.toml"
HEADERFIX_TOML_NAME: str = "headerfix.toml"

DEFAULT_COMPANY_NAME: str = "PlaceholderCompany"
DEFAULT_COPYRIGHT_TEXT: str = "Copyright (c) {companyName}. All rights reserved."
DEFAULT_XML_HEADER: bool = True
DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = ("*.cs",)

UTF8_BOM: str = "\ufeff"
