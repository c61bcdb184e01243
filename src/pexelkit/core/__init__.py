"""
Core utilities for pexelkit: errors, logging, configuration and randomness.
"""

from .exceptions import (
    ConfigurationError,
    EmptyResultError,
    NetworkError,
    NotFoundError,
    PexelkitError,
    ProtocolError,
)
from .logger import get_logger, set_level
from .random_source import RandomIndexProvider, default_random_source

__all__ = [
    "ConfigurationError",
    "EmptyResultError",
    "NetworkError",
    "NotFoundError",
    "PexelkitError",
    "ProtocolError",
    "RandomIndexProvider",
    "default_random_source",
    "get_logger",
    "set_level",
]
