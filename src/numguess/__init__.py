# topmark:header:start
#
#   project      : NumGuess
#   file         : __init__.py
#   file_relpath : src/numguess/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess package.

NumGuess is a small interactive number-guessing game for the terminal. It draws a
secret number, reads guesses from standard input, and reports whether each guess
is too small, too big, or correct.
"""

from __future__ import annotations
