# topmark:header:start
#
#   project      : NumGuess
#   file         : __init__.py
#   file_relpath : src/numguess/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration helpers for NumGuess (logging setup)."""

from __future__ import annotations
