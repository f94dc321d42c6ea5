# topmark:header:start
#
#   project      : NumGuess
#   file         : parsing.py
#   file_relpath : src/numguess/game/parsing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing of raw input lines into guesses."""

from __future__ import annotations

import re

from numguess.constants import GUESS_MAX

# Optional '+' then ASCII digits only; str.isdigit() would also admit
# non-ASCII digits and int() would admit '_' separators.
_GUESS_RE: re.Pattern[str] = re.compile(r"\+?[0-9]+")


def parse_guess(raw: str) -> int | None:
    """Parse one raw input line as an unsigned 32-bit decimal integer.

    Surrounding whitespace, including the line terminator, is trimmed first.

    Args:
        raw (str): The line as read from the console.

    Returns:
        int | None: The parsed guess, or ``None`` when the text is empty, is not a
            plain decimal numeral, carries a minus sign, or exceeds ``GUESS_MAX``.
    """
    text = raw.strip()
    if not _GUESS_RE.fullmatch(text):
        return None
    value = int(text)
    if value > GUESS_MAX:
        return None
    return value
