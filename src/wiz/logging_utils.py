"""Runtime logging helpers."""

from __future__ import annotations

import sys

import loguru
from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def _stderr_sink(message: loguru.Message) -> None:
    # Looked up per record so redirected stderr streams are honoured.
    sys.stderr.write(message)


def configure_logging(level: str = "WARNING") -> None:
    """Configure process-level logging once per level."""
    global _CONFIGURED_LEVEL
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        _stderr_sink,
        level=level,
        format=_LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = level


def is_verbose(level: str) -> bool:
    """Whether records below WARNING reach stderr at ``level``."""
    try:
        return logger.level(level.upper()).no < logger.level("WARNING").no
    except ValueError:
        return False
