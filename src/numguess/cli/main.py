# topmark:header:start
#
#   project      : NumGuess
#   file         : main.py
#   file_relpath : src/numguess/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess Click CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console from there. Invoking the group
without a subcommand plays a game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numguess.cli.commands.play import play_command
from numguess.cli.commands.version import version_command
from numguess.cli.console import ClickConsole
from numguess.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from numguess.cli_shared.color import ColorMode, resolve_color_mode
from numguess.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from numguess.config.logging import NumguessLogger

logger: NumguessLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (bool): Whether ``-q`` was passed.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("common state: %r", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NumGuess: guess the secret number.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: bool,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the NumGuess CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(play_command)


cli.add_command(play_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
