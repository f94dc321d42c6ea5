# topmark:header:start
#
#   project      : NumGuess
#   file         : __main__.py
#   file_relpath : src/numguess/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NumGuess via ``python -m numguess``.

It delegates directly to :func:`numguess.cli.main.cli`, so the module form and the
``numguess`` console script behave identically.

Examples:
    Play a seeded game::

        python -m numguess play --seed 7
"""

from __future__ import annotations

from numguess.cli.main import cli

if __name__ == "__main__":
    cli()
