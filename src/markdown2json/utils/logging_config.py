"""Logging setup shared by the CLI and library modules."""

from __future__ import annotations

import logging
import sys

from markdown2json.config import MARKDOWN2JSON_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Send markdown2json logs to stderr so stdout stays pure JSON."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger("markdown2json")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(level or MARKDOWN2JSON_LOG_LEVEL)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
