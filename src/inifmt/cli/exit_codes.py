# topmark:header:start
#
#   project      : IniFmt
#   file         : exit_codes.py
#   file_relpath : src/inifmt/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the IniFmt CLI.

IniFmt follows the BSD ``sysexits`` convention where practical. ``WOULD_CHANGE=2``
signals that ``--check`` found input that is not formatted yet; Click's own usage
errors also exit with 2, which is why IniFmt reports its usage errors with
``USAGE_ERROR`` (64) instead of relying on Click.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the IniFmt CLI.

    Attributes:
        SUCCESS: Successful execution; with ``--check`` the input is already formatted.
        FAILURE: Generic failure.
        WOULD_CHANGE: ``--check`` found input that would be reformatted.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Unreadable or malformed config file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
