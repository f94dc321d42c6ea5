# topmark:header:start
#
#   project      : NumGuess
#   file         : console.py
#   file_relpath : src/numguess/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console used by the CLI commands."""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from numguess.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo` and reading lines from stdin.

    Streams default to the ``sys`` streams current at construction time, which is
    what `click.testing.CliRunner` swaps out.

    Args:
        enable_color (bool): Keep ANSI styles; when False, `styled` is a no-op and
            `click.echo` strips any escape codes.
        out (TextIO | None): Transcript stream.
        err (TextIO | None): Error stream.
        inp (TextIO | None): Stream guesses are read from.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
        inp: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr
        self.inp: TextIO = inp or sys.stdin

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def read_line(self) -> str:
        return self.inp.readline()
