# topmark:header:start
#
#   project      : NumGuess
#   file         : errors.py
#   file_relpath : src/numguess/game/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the guessing game.

These are plain exceptions so the game layer stays independent of Click; the CLI
translates them into `numguess.cli.errors` exceptions with exit codes.
"""

from __future__ import annotations


class GuessInputClosedError(Exception):
    """The console input stream ended or failed before the secret was guessed."""
