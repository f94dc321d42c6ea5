# topmark:header:start
#
#   project      : NumGuess
#   file         : console_api.py
#   file_relpath : src/numguess/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console protocol shared by the game loop and the CLI commands.

The loop only ever talks to a `ConsoleLike`: it prints transcript lines, styles
verdicts, and reads guesses. Diagnostics go through logging instead.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What the game and the commands need from a terminal."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a transcript line to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with styling applied, or unchanged when color is off."""
        ...

    def read_line(self) -> str:
        """Return the next input line with its terminator, or ``""`` at end-of-stream."""
        ...
