# topmark:header:start
#
#   project      : NumGuess
#   file         : options.py
#   file_relpath : src/numguess/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Global presentation options for NumGuess: verbosity and color.

Verbosity is a single signed integer kept in ``ctx.obj["verbosity_level"]``:
``-1`` with ``--quiet``, ``0`` by default, and the ``-v`` count otherwise.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from numguess.cli.errors import NumguessUsageError
from numguess.cli_shared.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

QUIET_LEVEL = -1


def resolve_verbosity(verbose_count: int, quiet: bool) -> int:
    """Combine ``-v`` and ``-q`` into one verbosity level.

    Raises:
        NumguessUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet:
        raise NumguessUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet:
        return QUIET_LEVEL
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``-v/--verbose`` and ``-q/--quiet`` to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Announce the secret's range before the first prompt; more detail from `version`.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        help="Skip the 'Guess the number!' intro line.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--color`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)
    return f
