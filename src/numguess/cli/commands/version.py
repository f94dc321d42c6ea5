# topmark:header:start
#
#   project      : NumGuess
#   file         : version.py
#   file_relpath : src/numguess/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumGuess `version` command.

Prints the current NumGuess version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from numguess.cli.cmd_common import get_console, get_effective_verbosity
from numguess.cli_shared.utils import OutputFormat
from numguess.constants import NUMGUESS_VERSION

if TYPE_CHECKING:
    from numguess.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NumGuess.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: str | None = None) -> None:
    """Show the current version of NumGuess.

    Args:
        output_format (str | None): One of the `OutputFormat` values; plain text when omitted.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    fmt = OutputFormat((output_format or OutputFormat.DEFAULT.value).lower())
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": NUMGUESS_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# NumGuess Version\n")
        console.print(f"**NumGuess version: {NUMGUESS_VERSION}**")
    else:
        if vlevel > 0:
            console.print(console.styled("NumGuess version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(NUMGUESS_VERSION, bold=True)}")
        else:
            console.print(console.styled(NUMGUESS_VERSION, bold=True))
