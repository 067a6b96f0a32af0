# topmark:header:start
#
#   project      : HeaderFix
#   file         : status.py
#   file_relpath : src/headerfix/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums reported by the fix pipeline.

Values are human-readable strings used in CLI output; compare members with
``==`` rather than relying on the text.
"""

from __future__ import annotations

from yachalk import chalk

from headerfix.utils.colored_enum import ColoredStrEnum


class HeaderStatus(ColoredStrEnum):
    """Whether a document carried a header before the fix."""

    MISSING = ("header missing", chalk.yellow)
    PRESENT = ("header present", chalk.green)


class FixOutcome(ColoredStrEnum):
    """What a fix did (or would do) to a document."""

    UNCHANGED = ("unchanged", chalk.green)
    INSERTED = ("header inserted", chalk.yellow)
    REPLACED = ("header replaced", chalk.yellow)
    FAILED = ("failed", chalk.red_bright)
