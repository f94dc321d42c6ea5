# topmark:header:start
#
#   project      : NumGuess
#   file         : utils.py
#   file_relpath : src/numguess/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent CLI utilities shared by NumGuess commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON object (machine-readable, never colored).
      MARKDOWN: Markdown text.
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"
