# doxlate:header:start
#
#   project      : Doxlate
#   file         : exit_codes.py
#   file_relpath : src/doxlate/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# doxlate:header:end

"""Exit codes for the Doxlate CLI.

Values follow the BSD `sysexits` convention where one applies, so that build
scripts driving the converter can tell bad input from a bad configuration.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Doxlate CLI.

    Attributes:
        SUCCESS: All declarations were rendered.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed declaration document. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
