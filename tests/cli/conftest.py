# topmark:header:start
#
#   project      : NumGuess
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running NumGuess through Click's test runner."""

from __future__ import annotations

from typing import IO, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from numguess.cli.main import cli
from numguess.cli_shared.exit_codes import ExitCode
from numguess.config.logging import TRACE_LEVEL, setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-bind the root log handler after each CLI test.

    Every invocation installs a handler on the runner's temporary stderr, which is
    gone once the invocation returns.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with optional standard input.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["play", "--seed", "3"]``.
        input_text (str | bytes | IO[Any] | None): Text fed to standard input; this is
            where the guesses come from.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "play", "--seed", "1"], input_text="50\n")
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def transcript(result: Result) -> list[str]:
    """Return the stdout lines of ``result`` without trailing blanks."""
    return result.stdout.rstrip("\n").splitlines()


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_IO_ERROR(result: Result) -> None:
    """Assert that the command exited with IO_ERROR (code 74).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
