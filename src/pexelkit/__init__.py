"""
pexelkit - Pexels Photo & Video API Client
==========================================

Version: 0.1.0
"""

__version__ = "0.1.0"

from pexelkit.client import PHOTO_API, VIDEO_API, APIClient
from pexelkit.core.exceptions import (
    ConfigurationError,
    EmptyResultError,
    NetworkError,
    NotFoundError,
    PexelkitError,
    ProtocolError,
)
from pexelkit.models import (
    MediaSearchResult,
    Photo,
    PhotoSearchResult,
    PhotoSource,
    Video,
    VideoRendition,
    VideoSearchResult,
    VideoThumbnail,
)

__all__ = [
    "__version__",
    # Client
    "APIClient",
    "PHOTO_API",
    "VIDEO_API",
    # Errors
    "PexelkitError",
    "ConfigurationError",
    "NetworkError",
    "ProtocolError",
    "NotFoundError",
    "EmptyResultError",
    # Models
    "MediaSearchResult",
    "PhotoSearchResult",
    "VideoSearchResult",
    "Photo",
    "PhotoSource",
    "Video",
    "VideoRendition",
    "VideoThumbnail",
]
