# topmark:header:start
#
#   project      : UIStream
#   file         : exit_codes.py
#   file_relpath : src/uistream/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the UIStream CLI.

UIStream aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. ``FAILURE=1`` also signals
that at least one grade rule failed; tests must assert
``result.exception is None`` to tell a failing grade from an unexpected error.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the UIStream CLI.

    Attributes:
        SUCCESS: Successful execution; every evaluated grade rule passed.
        FAILURE: At least one grade rule failed, or a generic failure.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading an input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration or catalog error. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
