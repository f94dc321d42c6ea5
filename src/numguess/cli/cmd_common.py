# topmark:header:start
#
#   project      : NumGuess
#   file         : cmd_common.py
#   file_relpath : src/numguess/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by NumGuess subcommands for reading the Click context state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numguess.cli.console import ClickConsole

if TYPE_CHECKING:
    from numguess.cli_shared.console_api import ConsoleLike


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the verbosity level stored by the group callback (-1 quiet, 0 default)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level") or 0)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if missing.

    Subcommands may be invoked directly (e.g. from tests) without the group callback
    having populated ``ctx.obj``.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console
