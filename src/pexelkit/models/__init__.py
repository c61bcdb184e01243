"""Data models for pexelkit."""

from pexelkit.models.photo import PHOTO_SIZES, Photo, PhotoSource
from pexelkit.models.search import MediaSearchResult, PhotoSearchResult, VideoSearchResult
from pexelkit.models.video import Video, VideoRendition, VideoThumbnail

__all__ = [
    # Photos
    "PHOTO_SIZES",
    "Photo",
    "PhotoSource",
    # Videos
    "Video",
    "VideoRendition",
    "VideoThumbnail",
    # Pages
    "MediaSearchResult",
    "PhotoSearchResult",
    "VideoSearchResult",
]
