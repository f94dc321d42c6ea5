# topmark:header:start
#
#   project      : NumGuess
#   file         : constants.py
#   file_relpath : src/numguess/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

NUMGUESS_VERSION: str = get_version("numguess")

# Inclusive range the secret value is drawn from.
SECRET_MIN: Final[int] = 1
SECRET_MAX: Final[int] = 100

# Largest accepted guess (unsigned 32-bit).
GUESS_MAX: Final[int] = 2**32 - 1

MSG_INTRO: Final[str] = "Guess the number!"
MSG_RANGE_HINT: Final[str] = "The secret number is between {low} and {high}."
MSG_PROMPT: Final[str] = "Please input your guess."
MSG_ECHO: Final[str] = "You guessed: {value}"
MSG_TOO_SMALL: Final[str] = "Too small!"
MSG_TOO_BIG: Final[str] = "Too big!"
MSG_WIN: Final[str] = "You win!"
