# topmark:header:start
#
#   project      : NumGuess
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NumGuess test suite.

Sets up TRACE logging for test runs and keeps developer environment variables
(log level, color forcing) from leaking into individual tests.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from hypothesis import settings

from numguess.cli.console_std import StdConsole
from numguess.config import logging

if TYPE_CHECKING:
    from collections.abc import Callable

# "thorough" is selected by the nox property_test session
settings.register_profile("thorough", max_examples=1000, deadline=None)


@pytest.fixture(autouse=True)
def silence_numguess_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level and color mode are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("NUMGUESS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def make_console() -> Callable[[str], tuple[StdConsole, io.StringIO]]:
    """Return a factory building a `StdConsole` fed by ``input_text``.

    The factory returns the console and the in-memory stdout buffer holding the
    game transcript.
    """

    def _make(input_text: str) -> tuple[StdConsole, io.StringIO]:
        out = io.StringIO()
        console = StdConsole(out=out, err=io.StringIO(), inp=io.StringIO(input_text))
        return console, out

    return _make
