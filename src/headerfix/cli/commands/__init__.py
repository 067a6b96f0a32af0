# topmark:header:start
#
#   project      : HeaderFix
#   file         : __init__.py
#   file_relpath : src/headerfix/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix CLI subcommands."""

from __future__ import annotations
