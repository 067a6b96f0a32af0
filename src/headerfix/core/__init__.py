# topmark:header:start
#
#   project      : HeaderFix
#   file         : __init__.py
#   file_relpath : src/headerfix/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header engine: trivia model, boundary scanner, renderer and splicer.

Everything in this package is pure: functions take immutable inputs and return
new values, with no I/O and no shared state.
"""

from __future__ import annotations

from headerfix.core.errors import HeaderContractError
from headerfix.core.renderer import render_header
from headerfix.core.scanner import find_header_boundary, scan_header
from headerfix.core.settings import HeaderSettings
from headerfix.core.splicer import apply_header
from headerfix.core.trivia import Trivia, TriviaKind, TriviaSequence

__all__ = [
    "HeaderContractError",
    "HeaderSettings",
    "Trivia",
    "TriviaKind",
    "TriviaSequence",
    "apply_header",
    "find_header_boundary",
    "render_header",
    "scan_header",
]
