# topmark:header:start
#
#   project      : NumGuess
#   file         : verdict.py
#   file_relpath : src/numguess/game/verdict.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Three-way comparison of a guess against the secret value."""

from __future__ import annotations

from enum import Enum
from typing import Any

from numguess.constants import MSG_TOO_BIG, MSG_TOO_SMALL, MSG_WIN


class Verdict(Enum):
    """Outcome of comparing a guess with the secret.

    Attributes:
        LESS: The guess is below the secret.
        GREATER: The guess is above the secret.
        EQUAL: The guess is the secret.
    """

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"

    @property
    def message(self) -> str:
        """User-facing text for this verdict."""
        return _MESSAGES[self]

    @property
    def style(self) -> dict[str, Any]:
        """`click.style` keyword arguments used when color is enabled."""
        return dict(_STYLES[self])

    @property
    def is_final(self) -> bool:
        """True when the verdict ends the game."""
        return self is Verdict.EQUAL


_MESSAGES: dict[Verdict, str] = {
    Verdict.LESS: MSG_TOO_SMALL,
    Verdict.GREATER: MSG_TOO_BIG,
    Verdict.EQUAL: MSG_WIN,
}

_STYLES: dict[Verdict, dict[str, Any]] = {
    Verdict.LESS: {"fg": "yellow"},
    Verdict.GREATER: {"fg": "magenta"},
    Verdict.EQUAL: {"fg": "green", "bold": True},
}


def compare_guess(guess: int, secret: int) -> Verdict:
    """Return the verdict for ``guess`` against ``secret``."""
    if guess < secret:
        return Verdict.LESS
    if guess > secret:
        return Verdict.GREATER
    return Verdict.EQUAL
