# topmark:header:start
#
#   project      : HeaderFix
#   file         : __init__.py
#   file_relpath : src/headerfix/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix package.

HeaderFix normalizes the file header of C-style source files: the leading block
of ``//`` comments is detected and replaced with a canonical copyright header
(or one is inserted when none exists). The header engine lives in
`headerfix.core`; `headerfix.pipeline` applies it to files on disk and
`headerfix.cli` exposes it on the command line.
"""

from __future__ import annotations
