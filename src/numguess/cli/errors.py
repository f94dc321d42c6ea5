# topmark:header:start
#
#   project      : NumGuess
#   file         : errors.py
#   file_relpath : src/numguess/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click exceptions raised by NumGuess commands.

Each class pins an `ExitCode`; Click prints the message and exits with it.
"""

from __future__ import annotations

from typing import IO, Any

import click

from numguess.cli_shared.exit_codes import ExitCode


class NumguessError(click.ClickException):
    """Base class for NumGuess CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print through the context's console when one is still active."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class NumguessUsageError(NumguessError):
    """Invalid combination of command-line flags."""

    exit_code = ExitCode.USAGE_ERROR


class NumguessInputError(NumguessError):
    """Standard input ended, failed, or carried undecodable bytes mid-game."""

    exit_code = ExitCode.IO_ERROR
