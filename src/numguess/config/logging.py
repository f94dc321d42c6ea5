# topmark:header:start
#
#   project      : NumGuess
#   file         : logging.py
#   file_relpath : src/numguess/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for NumGuess.

Adds a TRACE level below DEBUG, colors records with yachalk, and sends everything
to stderr: stdout belongs to the game transcript. Nothing below CRITICAL is shown
unless ``NUMGUESS_LOG_LEVEL`` asks for it.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "NUMGUESS_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class NumguessLogger(logging.Logger):
    """Logger with a `trace` method for per-line input tracing."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(NumguessLogger)


# Checked top-down; the first threshold the record reaches picks the color.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the whole record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Read ``NUMGUESS_LOG_LEVEL`` as a level name or number.

    Returns None when the variable is unset or names no known level.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install one chalk-formatted stderr handler on the root logger.

    ``level`` falls back to the environment, then to CRITICAL. Any existing root
    handlers are removed so repeated calls never duplicate output.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> NumguessLogger:
    """Return the `NumguessLogger` called ``name``."""
    return cast("NumguessLogger", logging.getLogger(name))
