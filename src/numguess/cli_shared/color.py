# topmark:header:start
#
#   project      : NumGuess
#   file         : color.py
#   file_relpath : src/numguess/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deciding whether NumGuess output should carry ANSI color."""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True when output should be colored.

    JSON output is never colored. Otherwise an explicit ``always``/``never`` wins,
    then ``FORCE_COLOR`` (any value but ``"0"``) and ``NO_COLOR`` (any value), and
    finally whether stdout is a terminal. ``stdout_isatty`` overrides the terminal
    check for tests.
    """
    if output_format and output_format.lower() == "json":
        return False
    if color_mode_override in (ColorMode.ALWAYS, ColorMode.NEVER):
        return color_mode_override is ColorMode.ALWAYS

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    return _stdout_is_tty() if stdout_isatty is None else stdout_isatty
