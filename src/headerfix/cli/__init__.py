# topmark:header:start
#
#   project      : HeaderFix
#   file         : __init__.py
#   file_relpath : src/headerfix/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for HeaderFix."""

from __future__ import annotations
