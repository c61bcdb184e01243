"""
Logging Configuration
=====================

Centralized logging for the pexelkit package.

Usage:
    from pexelkit.core.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Request sent")
"""

import logging
import sys
from typing import Union

PACKAGE_NAME = "pexelkit"
LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured Logger instance
    """
    _ensure_configured()
    return logging.getLogger(name)


def _ensure_configured() -> None:
    """Configure the package logger if not already done."""
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    _configured = True


def set_level(level: Union[int, str]) -> None:
    """
    Set the logging level for the pexelkit package.

    Args:
        level: Logging level (e.g., logging.DEBUG or "WARNING")
    """
    _ensure_configured()
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_NAME).setLevel(level)
