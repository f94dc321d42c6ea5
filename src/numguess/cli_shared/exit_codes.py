# topmark:header:start
#
#   project      : NumGuess
#   file         : exit_codes.py
#   file_relpath : src/numguess/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process exit codes, following BSD ``sysexits.h`` where one fits."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit statuses of the ``numguess`` command.

    Attributes:
        SUCCESS: The secret was guessed, or a non-game command succeeded.
        FAILURE: Generic failure; Click also exits 1 after Ctrl-C (``Aborted!``).
        USAGE_ERROR: Conflicting flags (``EX_USAGE``).
        IO_ERROR: Standard input ended or was unreadable before the win (``EX_IOERR``).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    IO_ERROR = 74
