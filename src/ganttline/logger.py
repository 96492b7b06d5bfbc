"""Verbosity-controlled logging for header rendering.

Two extra levels sit between the standard ones so ``-v`` steps through
increasingly chatty output:

    -v 0  errors only
    -v 1  RENDER: one summary per render pass (requested and expanded ranges)
    -v 2  CELLS: every header cell a generator emits
    -v 3  DEBUG: catalog fallbacks and anything else
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "ganttline"

RENDER_LEVEL = 25  # Between INFO and WARNING
CELLS_LEVEL = 15  # Between DEBUG and INFO

logging.addLevelName(RENDER_LEVEL, "RENDER")
logging.addLevelName(CELLS_LEVEL, "CELLS")

# Indexed by verbosity; anything above the last entry logs everything
VERBOSITY_LEVELS: tuple[int, ...] = (logging.ERROR, RENDER_LEVEL, CELLS_LEVEL, logging.DEBUG)


class GanttlineLogger(logging.Logger):
    """Logger with ``render()`` and ``cells()`` methods for the extra levels."""

    def render(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log_at(RENDER_LEVEL, msg, args, kwargs)

    def cells(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log_at(CELLS_LEVEL, msg, args, kwargs)

    def _log_at(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if self.isEnabledFor(level):
            self._log(level, msg, args, **kwargs)


class _LevelAwareFormatter(logging.Formatter):
    """Bare messages for verbosity output, ``LEVEL: message`` for problems."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


def get_logger() -> GanttlineLogger:
    """The package logger; the same instance on every call."""
    logging.setLoggerClass(GanttlineLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, GanttlineLogger)
    return logger


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return VERBOSITY_LEVELS[0]
    return VERBOSITY_LEVELS[min(verbosity, len(VERBOSITY_LEVELS) - 1)]


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send ganttline log output to ``stream`` (stderr by default).

    Replaces any handler from an earlier call, so the CLI can reconfigure
    the logger for each command.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(level_for_verbosity(verbosity))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_LevelAwareFormatter())
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to errors-only, propagating to the root logger."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.propagate = True


def _enabled(level: int) -> bool:
    return get_logger().isEnabledFor(level)


def is_silent() -> bool:
    return get_logger().level >= logging.ERROR


def render_enabled() -> bool:
    return _enabled(RENDER_LEVEL)


def cells_enabled() -> bool:
    """True at verbosity 2 and above.

    Generators check this once per tier to skip building per-cell messages.
    """
    return _enabled(CELLS_LEVEL)


def debug_enabled() -> bool:
    return _enabled(logging.DEBUG)
