# models/video.py
"""
Data models for Pexels videos.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .base import ToDictMixin, as_float, as_int, as_list, as_str, require_object


@dataclass(frozen=True)
class VideoRendition(ToDictMixin):
    """
    One encoded variant of a video.

    Attributes:
        id: Rendition ID.
        quality: Quality label ("hd", "sd", "uhd", ...).
        file_type: MIME type (e.g. "video/mp4").
        width: Width in pixels.
        height: Height in pixels.
        download_url: Direct link to the file.
    """

    id: int
    quality: str
    file_type: str
    width: int
    height: int
    download_url: str

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "VideoRendition":
        """Create a rendition from a "video_files" entry."""
        data = require_object(data, "video file")
        return cls(
            id=as_int(data, "id"),
            quality=as_str(data, "quality"),
            file_type=as_str(data, "file_type"),
            width=as_int(data, "width"),
            height=as_int(data, "height"),
            download_url=as_str(data, "link"),
        )


@dataclass(frozen=True)
class VideoThumbnail(ToDictMixin):
    """A preview picture of a video, numbered by its position in the clip."""

    id: int
    image_url: str
    sequence_number: int

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "VideoThumbnail":
        """Create a thumbnail from a "video_pictures" entry."""
        data = require_object(data, "video picture")
        return cls(
            id=as_int(data, "id"),
            image_url=as_str(data, "picture"),
            sequence_number=as_int(data, "nr"),
        )


@dataclass(frozen=True)
class Video(ToDictMixin):
    """
    A single Pexels video.

    Attributes:
        id: Video ID.
        width: Width in pixels.
        height: Height in pixels.
        page_url: URL of the video's page on pexels.com.
        preview_image_url: URL of the poster image.
        duration_seconds: Duration in seconds.
        files: Available renditions, in API order.
        preview_pictures: Preview pictures, in API order.
        full_res: The API's "full_res" value, kept verbatim since its
            shape is undocumented. None when absent.
    """

    id: int
    width: int
    height: int
    page_url: str
    preview_image_url: str
    duration_seconds: float
    files: Tuple[VideoRendition, ...] = ()
    preview_pictures: Tuple[VideoThumbnail, ...] = ()
    full_res: Optional[Any] = field(default=None, compare=False)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Video":
        """Create a video from Pexels API response data."""
        data = require_object(data, "video")
        return cls(
            id=as_int(data, "id"),
            width=as_int(data, "width"),
            height=as_int(data, "height"),
            page_url=as_str(data, "url"),
            preview_image_url=as_str(data, "image"),
            duration_seconds=as_float(data, "duration"),
            files=tuple(VideoRendition.from_api_response(f) for f in as_list(data, "video_files")),
            preview_pictures=tuple(
                VideoThumbnail.from_api_response(p) for p in as_list(data, "video_pictures")
            ),
            full_res=data.get("full_res"),
        )

    def best_file(self, quality: Optional[str] = None) -> Optional[VideoRendition]:
        """
        Pick the largest rendition by pixel area, optionally filtered by quality.

        Args:
            quality: Only consider renditions with this quality label.

        Returns:
            The largest matching rendition, or None if none match.
        """
        candidates = [f for f in self.files if quality is None or f.quality == quality]
        if not candidates:
            return None
        return max(candidates, key=lambda f: f.width * f.height)
