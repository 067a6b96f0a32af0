# topmark:header:start
#
#   project      : HeaderFix
#   file         : __init__.py
#   file_relpath : src/headerfix/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeaderFix configuration: TOML loading, layered merging and logging setup.

Public names:
    - `MutableConfig`: builder used while discovering and merging layers.
    - `Config`: frozen snapshot that resolves the engine's `HeaderSettings`.
"""

from __future__ import annotations

from headerfix.config.model import Config, MutableConfig, expand_variables

__all__ = [
    "Config",
    "MutableConfig",
    "expand_variables",
]
