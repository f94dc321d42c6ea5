# topmark:header:start
#
#   project      : NumGuess
#   file         : test_color.py
#   file_relpath : tests/cli/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-mode resolution precedence."""

from __future__ import annotations

import pytest

from numguess.cli_shared.color import ColorMode, resolve_color_mode


def test_json_output_never_uses_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Machine formats beat every other signal."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json")


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(ColorMode.ALWAYS, True), (ColorMode.NEVER, False)],
)
def test_cli_override_beats_environment(
    monkeypatch: pytest.MonkeyPatch, mode: ColorMode, expected: bool
) -> None:
    """Explicit --color wins over FORCE_COLOR/NO_COLOR."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=mode, output_format=None) is expected


def test_force_color_enables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR (non-zero) turns color on even without a TTY."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(
        color_mode_override=ColorMode.AUTO, output_format=None, stdout_isatty=False
    )


def test_no_color_disables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR turns color off even on a TTY."""
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(
        color_mode_override=None, output_format=None, stdout_isatty=True
    )


@pytest.mark.parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    """Without overrides the TTY status decides."""
    assert (
        resolve_color_mode(color_mode_override=None, output_format=None, stdout_isatty=isatty)
        is isatty
    )
