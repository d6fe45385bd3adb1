"""Logging utilities for svcguard commands.

Records go to stderr in the same shape git uses for its own diagnostics
(``svcguard: error: ...``) so they read naturally inside ``git commit``
output, while the commit report itself is printed to stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .colors import CYAN, RED, YELLOW, colorize

_LOGGER_NAME = "svcguard"

_LEVEL_COLORS = {
    logging.DEBUG: CYAN,
    logging.WARNING: YELLOW,
    logging.ERROR: RED,
    logging.CRITICAL: RED,
}


class HookFormatter(logging.Formatter):
    """Formats records as ``svcguard: <level>: <message>``."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__("%(message)s")
        self._stream = stream

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        label = record.levelname.lower()
        code = _LEVEL_COLORS.get(record.levelno)
        if code is not None:
            label = colorize(code, label, self._stream or sys.stderr)
        return f"{_LOGGER_NAME}: {label}: {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the svcguard hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the svcguard logger; quiet (WARNING) unless ``verbose``."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(HookFormatter(sys.stderr))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["HookFormatter", "configure_logging", "get_logger"]
