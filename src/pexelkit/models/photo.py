# models/photo.py
"""
Data models for Pexels photos.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from .base import ToDictMixin, as_int, as_object, as_str, require_object

# Size names of the "src" object, in the order the API documents them.
PHOTO_SIZES: Tuple[str, ...] = (
    "original",
    "large",
    "large2x",
    "medium",
    "small",
    "portrait",
    "square",
    "landscape",
    "tiny",
)


@dataclass(frozen=True)
class PhotoSource(ToDictMixin):
    """
    Image URLs of a photo, one per size name.

    Every size is always present; a size the API omitted is an empty
    string. Sizes can be read as attributes or by name:

        >>> photo.sources.medium
        >>> photo.sources["medium"]
    """

    original: str = ""
    large: str = ""
    large2x: str = ""
    medium: str = ""
    small: str = ""
    portrait: str = ""
    square: str = ""
    landscape: str = ""
    tiny: str = ""

    def __getitem__(self, size: str) -> str:
        if size not in PHOTO_SIZES:
            raise KeyError(size)
        return getattr(self, size)

    def __iter__(self):
        return iter(PHOTO_SIZES)

    def __len__(self) -> int:
        return len(PHOTO_SIZES)

    def items(self):
        """Return (size, url) pairs in size order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "PhotoSource":
        """Create a source map from the API's "src" object."""
        data = require_object(data, "photo src")
        return cls(**{size: as_str(data, size) for size in PHOTO_SIZES})


@dataclass(frozen=True)
class Photo(ToDictMixin):
    """
    A single Pexels photo.

    Attributes:
        id: Photo ID.
        width: Width in pixels.
        height: Height in pixels.
        page_url: URL of the photo's page on pexels.com.
        photographer_name: Name of the photographer.
        photographer_url: URL of the photographer's profile.
        sources: Image URLs by size name.
        photographer_id: ID of the photographer.
        avg_color: Average color as a hex string (e.g. "#978E82").
        alt: Alternative text describing the photo.
    """

    id: int
    width: int
    height: int
    page_url: str
    photographer_name: str
    photographer_url: str
    sources: PhotoSource
    photographer_id: int = 0
    avg_color: str = ""
    alt: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Photo":
        """Create a photo from Pexels API response data."""
        data = require_object(data, "photo")
        return cls(
            id=as_int(data, "id"),
            width=as_int(data, "width"),
            height=as_int(data, "height"),
            page_url=as_str(data, "url"),
            photographer_name=as_str(data, "photographer"),
            photographer_url=as_str(data, "photographer_url"),
            sources=PhotoSource.from_api_response(as_object(data, "src")),
            photographer_id=as_int(data, "photographer_id"),
            avg_color=as_str(data, "avg_color"),
            alt=as_str(data, "alt"),
        )
