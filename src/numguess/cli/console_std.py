# topmark:header:start
#
#   project      : NumGuess
#   file         : console_std.py
#   file_relpath : src/numguess/cli/console_std.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-stream console (no Click, no color)."""

from __future__ import annotations

import sys
from typing import TextIO

from numguess.cli_shared.console_api import ConsoleLike


class StdConsole(ConsoleLike):
    """Console over plain text streams; handy for driving a game from `io.StringIO`."""

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        inp: TextIO | None = None,
    ) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.inp = inp or sys.stdin

    def print(self, text: str = "", *, nl: bool = True) -> None:
        self.out.write(text + ("\n" if nl else ""))
        self.out.flush()

    def error(self, text: str, *, nl: bool = True) -> None:
        self.err.write(text + ("\n" if nl else ""))

    def styled(self, text: str, **style_kwargs: object) -> str:
        return text

    def read_line(self) -> str:
        return self.inp.readline()
