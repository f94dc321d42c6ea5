# topmark:header:start
#
#   project      : NumGuess
#   file         : play.py
#   file_relpath : src/numguess/cli/commands/play.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess `play` command.

Runs one game on the console stored in the Click context. This is also what the
bare ``numguess`` invocation runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numguess.cli.cmd_common import get_console, get_effective_verbosity
from numguess.cli.errors import NumguessInputError
from numguess.config.logging import get_logger
from numguess.game import GuessInputClosedError, RandomSecretSource, play

if TYPE_CHECKING:
    from numguess.cli_shared.console_api import ConsoleLike
    from numguess.config.logging import NumguessLogger
    from numguess.game import GameOutcome

logger: NumguessLogger = get_logger(__name__)


@click.command(
    name="play",
    help="Guess a secret number between 1 and 100.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the secret number so a game can be replayed.",
)
@click.pass_context
def play_command(ctx: click.Context, *, seed: int | None = None) -> None:
    """Play one game of guess-the-number.

    Args:
        ctx (click.Context): Current Click context.
        seed (int | None): Optional seed for the secret number.

    Raises:
        NumguessInputError: If standard input ends or fails before the number is guessed.
    """
    console: ConsoleLike = get_console(ctx)

    try:
        outcome: GameOutcome = play(
            console, RandomSecretSource(seed), verbosity=get_effective_verbosity(ctx)
        )
    except GuessInputClosedError as exc:
        logger.debug("game aborted: %s", exc)
        raise NumguessInputError(str(exc)) from exc

    logger.info("game won in %d attempt(s)", outcome.attempts)
