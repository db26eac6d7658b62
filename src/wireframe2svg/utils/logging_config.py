"""Logging setup shared by the library, the CLI and the server."""

from __future__ import annotations

import logging
import sys

from wireframe2svg.config import WIREFRAME2SVG_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"

# Third-party loggers that are too chatty at INFO.
_SILENCED_LOGGERS = ("httpx", "httpcore")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger with a single stderr handler.

    Args:
        level: Log level name or number. Defaults to ``WIREFRAME2SVG_LOG_LEVEL``.
    """
    level = level if level is not None else WIREFRAME2SVG_LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO) if isinstance(level, str) else level

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name in _SILENCED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
