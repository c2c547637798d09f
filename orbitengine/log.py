"""Engine and client loggers."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_NAME = "Orbit"
CLIENT_NAME = "App"

_PATTERN = "[%(asctime)s] %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_RESET = "\033[0m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}

_installed: dict[str, logging.Handler] = {}


class _ColorFormatter(logging.Formatter):
    def __init__(self, use_color: bool) -> None:
        super().__init__(_PATTERN, _DATEFMT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self._use_color:
            return text
        color = next(
            (c for level, c in sorted(_COLORS.items(), reverse=True) if record.levelno >= level),
            "",
        )
        return f"{color}{text}{_RESET}"


def _supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def init() -> None:
    """Configure the core and client loggers to print everything to stdout."""
    stream = sys.stdout
    for name in (CORE_NAME, CLIENT_NAME):
        logger = logging.getLogger(name)
        previous = _installed.pop(name, None)
        if previous is not None:
            logger.removeHandler(previous)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_ColorFormatter(_supports_color(stream)))
        logger.addHandler(handler)
        logger.setLevel(TRACE)
        logger.propagate = False
        _installed[name] = handler


def core_logger() -> logging.Logger:
    """Logger used by the engine itself."""
    return logging.getLogger(CORE_NAME)


def client_logger() -> logging.Logger:
    """Logger for application code."""
    return logging.getLogger(CLIENT_NAME)