"""CLI command modules for pexelkit."""

from .config import config
from .photos import photos
from .videos import videos

__all__ = [
    "config",
    "photos",
    "videos",
]
