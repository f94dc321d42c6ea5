# topmark:header:start
#
#   project      : NumGuess
#   file         : loop.py
#   file_relpath : src/numguess/game/loop.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The interactive guessing loop.

`GuessingLoop` owns the secret for one game. Each iteration prompts, reads one line,
and either silently re-prompts (unparsable input) or echoes the guess and prints a
verdict. The loop returns only when the secret is guessed; a closed or unreadable
input stream, or a line that is not valid text, raises `GuessInputClosedError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from numguess.config.logging import get_logger
from numguess.constants import (
    MSG_ECHO,
    MSG_INTRO,
    MSG_PROMPT,
    MSG_RANGE_HINT,
    SECRET_MAX,
    SECRET_MIN,
)
from numguess.game.errors import GuessInputClosedError
from numguess.game.parsing import parse_guess
from numguess.game.secret import RandomSecretSource
from numguess.game.verdict import compare_guess

if TYPE_CHECKING:
    from numguess.cli_shared.console_api import ConsoleLike
    from numguess.config.logging import NumguessLogger
    from numguess.game.secret import SecretSource

logger: NumguessLogger = get_logger(__name__)


@dataclass(frozen=True)
class GameOutcome:
    """Record of one finished game.

    Attributes:
        secret (int): The secret value that was guessed.
        prompts (int): Number of prompts printed, equal to the number of lines read.
        guesses (tuple[int, ...]): Accepted guesses in order; the last one is the secret.
    """

    secret: int
    prompts: int
    guesses: tuple[int, ...]

    @property
    def attempts(self) -> int:
        """Number of guesses that parsed successfully."""
        return len(self.guesses)


class GuessingLoop:
    """One game of guess-the-number.

    Args:
        console (ConsoleLike): Console used for the transcript and for line input.
        secret_source (SecretSource | None): Source of the secret; defaults to an
            unseeded `RandomSecretSource`.
        verbosity (int): Below 0 the intro line is skipped; above 0 the secret's
            range is announced after it. 0 gives the plain transcript.
    """

    def __init__(
        self,
        console: ConsoleLike,
        secret_source: SecretSource | None = None,
        *,
        verbosity: int = 0,
    ) -> None:
        self.console = console
        self.verbosity = verbosity
        source: SecretSource = secret_source or RandomSecretSource()
        self._secret: int = source.draw(SECRET_MIN, SECRET_MAX)

    @property
    def secret(self) -> int:
        """The secret value for this game."""
        return self._secret

    def _read_raw_line(self) -> str:
        try:
            raw = self.console.read_line()
        except UnicodeDecodeError as exc:
            raise GuessInputClosedError(f"Input is not valid text: {exc.reason}") from exc
        except OSError as exc:
            raise GuessInputClosedError(f"Could not read from the input stream: {exc}") from exc
        if raw == "":
            raise GuessInputClosedError("Input stream closed before the number was guessed.")
        # A surrogateescape stdin smuggles undecodable bytes through as lone surrogates
        try:
            raw.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise GuessInputClosedError(f"Input is not valid text: {exc.reason}") from exc
        return raw

    def run(self) -> GameOutcome:
        """Play until the secret is guessed.

        Returns:
            GameOutcome: Summary of the finished game.

        Raises:
            GuessInputClosedError: If the input stream ends or fails first.
        """
        console = self.console
        if self.verbosity >= 0:
            console.print(MSG_INTRO)
        if self.verbosity > 0:
            console.print(MSG_RANGE_HINT.format(low=SECRET_MIN, high=SECRET_MAX))

        prompts = 0
        guesses: list[int] = []
        while True:
            console.print(MSG_PROMPT)
            prompts += 1

            raw = self._read_raw_line()
            logger.trace("read line %r", raw)

            guess = parse_guess(raw)
            if guess is None:
                logger.debug("ignoring unparsable input %r", raw.strip())
                continue

            guesses.append(guess)
            console.print(MSG_ECHO.format(value=guess))

            verdict = compare_guess(guess, self._secret)
            logger.debug("guess %d -> %s", guess, verdict.name)
            console.print(console.styled(verdict.message, **verdict.style))

            if verdict.is_final:
                logger.info("secret %d guessed after %d prompt(s)", self._secret, prompts)
                return GameOutcome(secret=self._secret, prompts=prompts, guesses=tuple(guesses))


def play(
    console: ConsoleLike,
    secret_source: SecretSource | None = None,
    *,
    verbosity: int = 0,
) -> GameOutcome:
    """Run one game on ``console`` and return its outcome."""
    return GuessingLoop(console, secret_source, verbosity=verbosity).run()
