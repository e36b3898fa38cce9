"""Logging for the ``orderwrap`` package.

The CLI calls ``configure_logging`` once; library modules only ask for a
logger with ``get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_PKG_LOGGER_NAME = "orderwrap"
_ENV_LEVEL = "ORDERWRAP_LOG_LEVEL"
_STREAM = sys.stderr


def _parse_level(name: Optional[str]) -> int:
    name = (name or os.getenv(_ENV_LEVEL) or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> None:
    """Send package records at ``level`` (or ``$ORDERWRAP_LOG_LEVEL``) to stderr."""

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return
    logger.handlers.clear()

    handler = logging.StreamHandler(_STREAM)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    )
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
