# topmark:header:start
#
#   project      : HeaderFix
#   file         : __main__.py
#   file_relpath : src/headerfix/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running HeaderFix via ``python -m headerfix``.

Equivalent to running the ``headerfix`` console script.

Examples:
    Preview header changes for a source tree::

        python -m headerfix check src
"""

from __future__ import annotations

from headerfix.cli.main import cli

if __name__ == "__main__":
    cli()
