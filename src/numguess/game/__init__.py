# topmark:header:start
#
#   project      : NumGuess
#   file         : __init__.py
#   file_relpath : src/numguess/game/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Guess-the-number game logic, independent of any CLI framework."""

from __future__ import annotations

from numguess.game.errors import GuessInputClosedError
from numguess.game.loop import GameOutcome, GuessingLoop, play
from numguess.game.parsing import parse_guess
from numguess.game.secret import FixedSecretSource, RandomSecretSource, SecretSource
from numguess.game.verdict import Verdict, compare_guess

__all__ = [
    "FixedSecretSource",
    "GameOutcome",
    "GuessInputClosedError",
    "GuessingLoop",
    "RandomSecretSource",
    "SecretSource",
    "Verdict",
    "compare_guess",
    "parse_guess",
    "play",
]
