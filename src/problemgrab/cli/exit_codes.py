# topmark:header:start
#
#   project      : ProblemGrab
#   file         : exit_codes.py
#   file_relpath : src/problemgrab/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Exit codes for the ProblemGrab CLI.

ProblemGrab aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. "No problems found" is not
a failure and exits with `SUCCESS`.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ProblemGrab CLI.

    Attributes:
        SUCCESS: Successful execution, including captures that found nothing.
        FAILURE: Generic failure (e.g. an unreadable or malformed snapshot).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: The report could not be delivered. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
