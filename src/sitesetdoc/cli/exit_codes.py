# topmark:header:start
#
#   project      : SiteSetDoc
#   file         : exit_codes.py
#   file_relpath : src/sitesetdoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the SiteSetDoc CLI.

SiteSetDoc aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SiteSetDoc CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: The settings source does not hold a usable ``settings``
            mapping. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The settings source cannot be found or read. Mirrors
            BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: SiteSetDoc configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
