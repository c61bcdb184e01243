# models/search.py
"""
Paged result models shared by the photo and video endpoints.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Tuple, TypeVar

from .base import ToDictMixin, as_int, as_list, as_str, require_object
from .photo import Photo
from .video import Video

T = TypeVar("T")


@dataclass(frozen=True)
class MediaSearchResult(ToDictMixin, Generic[T]):
    """
    One page of photos or videos.

    Items keep the order the API returned them in.

    Attributes:
        page: Page number.
        per_page: Requested page size.
        total_results: Total number of matches (0 for feeds that omit it).
        next_page: URL of the next page, empty if this is the last one.
        items: Photos or videos on this page.
        prev_page: URL of the previous page, empty on the first one.
        url: URL the API reports for the listing itself, if any.
    """

    page: int
    per_page: int
    total_results: int
    next_page: str
    items: Tuple[T, ...]
    prev_page: str = ""
    url: str = ""

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_next(self) -> bool:
        """Whether the API advertised a next page."""
        return bool(self.next_page)

    @classmethod
    def _decode(
        cls,
        data: Any,
        items_key: str,
        item_factory: Callable[[Dict[str, Any]], T],
    ):
        data = require_object(data, "search result")
        return cls(
            page=as_int(data, "page"),
            per_page=as_int(data, "per_page"),
            total_results=as_int(data, "total_results"),
            next_page=as_str(data, "next_page"),
            items=tuple(item_factory(item) for item in as_list(data, items_key)),
            prev_page=as_str(data, "prev_page"),
            url=as_str(data, "url"),
        )


@dataclass(frozen=True)
class PhotoSearchResult(MediaSearchResult[Photo]):
    """A page of photos from the search or curated endpoints."""

    @property
    def photos(self) -> Tuple[Photo, ...]:
        return self.items

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "PhotoSearchResult":
        """Create a photo page from Pexels API response data."""
        return cls._decode(data, "photos", Photo.from_api_response)


@dataclass(frozen=True)
class VideoSearchResult(MediaSearchResult[Video]):
    """A page of videos from the search or popular endpoints."""

    @property
    def videos(self) -> Tuple[Video, ...]:
        return self.items

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "VideoSearchResult":
        """Create a video page from Pexels API response data."""
        return cls._decode(data, "videos", Video.from_api_response)
