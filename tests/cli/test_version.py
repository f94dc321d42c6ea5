# topmark:header:start
#
#   project      : NumGuess
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

import pytest
from packaging.version import InvalidVersion, Version

from numguess.constants import NUMGUESS_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_pep440_version() -> None:
    """It should output the PEP 440 version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)

    out: str = result.output.strip()
    assert out == NUMGUESS_VERSION

    try:
        Version(out)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {out!r} ({exc})")


def test_version_verbose_adds_title() -> None:
    """With -v the plain format prints a title line before the version."""
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "NumGuess version:" in result.output
    assert NUMGUESS_VERSION in result.output


def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with a correct version value."""
    result = run_cli(["--no-color", "version", "--format", "json"])
    assert_SUCCESS(result)

    try:
        payload = json.loads(result.output)
    except json.JSONDecodeError as exc:  # pragma: no cover - clearer error
        raise AssertionError(f"Output is not valid JSON: {exc}\nRAW:\n{result.output}") from exc

    assert payload == {"version": NUMGUESS_VERSION}


def test_version_markdown_format() -> None:
    """`version --format markdown` prints a heading and the version."""
    result = run_cli(["--no-color", "version", "--format", "MARKDOWN"])
    assert_SUCCESS(result)

    out = result.output.strip()
    assert out.startswith("# NumGuess Version")
    assert NUMGUESS_VERSION in out


def test_version_rejects_unknown_format() -> None:
    """Unknown formats are rejected by Click before the command runs."""
    result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2
    assert "'yaml' is not one of" in result.output
