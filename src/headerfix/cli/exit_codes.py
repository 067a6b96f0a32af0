# topmark:header:start
#
#   project      : HeaderFix
#   file         : exit_codes.py
#   file_relpath : src/headerfix/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the HeaderFix CLI.

HeaderFix follows the BSD `sysexits` convention where practical. The one
deliberate divergence is ``WOULD_CHANGE = 2``, returned by a dry run that found
files needing a new header. Click's own usage errors also exit with 2, so tests
must assert ``result.exception is None`` to tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the HeaderFix CLI.

    Attributes:
        SUCCESS: Nothing to change, or all changes applied.
        FAILURE: Generic failure.
        WOULD_CHANGE: Dry run: files would change if ``--apply`` were set.
        USAGE_ERROR: Invalid flags or arguments (``EX_USAGE``).
        ENCODING_ERROR: A file could not be decoded as UTF-8 (``EX_DATAERR``).
        FILE_NOT_FOUND: An input path does not exist (``EX_NOINPUT``).
        PIPELINE_ERROR: Engine contract violation (``EX_SOFTWARE``).
        IO_ERROR: Reading or writing a file failed (``EX_IOERR``).
        CONFIG_ERROR: Invalid configuration (``EX_CONFIG``).
        UNEXPECTED_ERROR: Anything else.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
