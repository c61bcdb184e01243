"""
Pexels API Client
=================

Synchronous client for the Pexels photo and video REST API.

Every public method performs one blocking GET, checks the status, records
the ``X-Ratelimit-Remaining`` header and decodes the JSON body into an
immutable record. Failures raise a PexelkitError subclass immediately;
nothing is cached or retried.

Example:
    >>> from pexelkit import APIClient
    >>>
    >>> with APIClient(token="your-api-key") as client:
    ...     result = client.search_photos("nature", per_page=15, page=1)
    ...     for photo in result.photos:
    ...         print(photo.id, photo.sources.medium)
    ...     print(f"Requests left: {client.get_remaining_quota()}")
"""

import re
from typing import Any, Callable, Optional, TypeVar

import requests

from pexelkit import __version__
from pexelkit.core.exceptions import (
    ConfigurationError,
    EmptyResultError,
    NetworkError,
    NotFoundError,
    ProtocolError,
)
from pexelkit.core.logger import get_logger
from pexelkit.core.random_source import RandomIndexProvider, default_random_source
from pexelkit.models import Photo, PhotoSearchResult, Video, VideoSearchResult

logger = get_logger(__name__)

PHOTO_API = "https://api.pexels.com/v1/"
VIDEO_API = "https://api.pexels.com/videos/"

RATE_LIMIT_HEADER = "X-Ratelimit-Remaining"

# Quota values are plain base-10 integers with an optional sign.
_QUOTA_RE = re.compile(r"[+-]?[0-9]+")

# Random helpers draw a feed page index from [0, RANDOM_PAGE_LIMIT).
RANDOM_PAGE_LIMIT = 1000

R = TypeVar("R")


class APIClient:
    """
    Client for the Pexels API.

    The client owns one ``requests.Session`` and one mutable field,
    ``remaining_quota``, written after every successful request. The quota
    is informational only; when a client is shared between threads it is
    best-effort, so serialize calls if you need an exact value.

    Args:
        token: Pexels API key, sent verbatim in the Authorization header.
        session: Session to use instead of a new one. Not closed by close().
        random_source: Index provider for get_random_photo/get_random_video.
            Defaults to a generator seeded once from OS entropy.
        timeout: Request timeout in seconds. None waits indefinitely.
        photo_api_url: Base URL of the photo API.
        video_api_url: Base URL of the video API.
        user_agent: User-Agent header value.

    Raises:
        ConfigurationError: If token is empty.

    Example:
        >>> client = APIClient(token="your-api-key", timeout=30)
        >>> photo = client.get_random_photo()
        >>> print(photo.photographer_name)
    """

    def __init__(
        self,
        token: str,
        *,
        session: Optional[requests.Session] = None,
        random_source: Optional[RandomIndexProvider] = None,
        timeout: Optional[float] = None,
        photo_api_url: str = PHOTO_API,
        video_api_url: str = VIDEO_API,
        user_agent: str = f"pexelkit/{__version__}",
    ) -> None:
        if not isinstance(token, str) or not token.strip():
            raise ConfigurationError("Pexels API token must not be empty.")

        self.token = token
        self.timeout = timeout
        self.photo_api_url = _with_trailing_slash(photo_api_url)
        self.video_api_url = _with_trailing_slash(video_api_url)
        self.random_source = random_source or default_random_source()
        self.user_agent = user_agent
        self._remaining_quota = 0

        self._owns_session = session is None
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config=None, token: Optional[str] = None, **kwargs) -> "APIClient":
        """
        Build a client from pexelkit configuration.

        Args:
            config: Config to read [api] settings from (default: get_config()).
            token: Explicit token; falls back to PEXELS_API_KEY, then [api] token.
            **kwargs: Overrides passed through to the constructor.

        Returns:
            A configured APIClient.
        """
        from pexelkit.core.config import get_config, resolve_token

        if config is None:
            config = get_config()

        options = {
            "timeout": config.get("api", "timeout"),
            "photo_api_url": config.get("api", "photo_url", PHOTO_API),
            "video_api_url": config.get("api", "video_url", VIDEO_API),
        }
        user_agent = config.get("api", "user_agent")
        if user_agent:
            options["user_agent"] = user_agent
        options.update(kwargs)

        return cls(resolve_token(token, config), **options)

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    def _request_with_auth(self, method: str, url: str) -> requests.Response:
        """
        Send an authenticated request and record the rate-limit header.

        Raises:
            NetworkError: On connection, DNS, TLS or timeout failure.
            NotFoundError: If the API answers 404.
            ProtocolError: On any other non-2xx status, or if the
                rate-limit header is missing or not an integer.
        """
        logger.debug(f"API Request: {method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers={"Authorization": self.token, "User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request failed: {e}", url=url) from e

        status = response.status_code
        if status == 404:
            logger.debug(f"API returned 404 for {url}")
            raise NotFoundError(f"Resource not found: {url}")
        if not 200 <= status < 300:
            logger.warning(f"API error {status} for {url}")
            raise ProtocolError(f"API error for {url}: {_error_detail(response)}", status_code=status)

        raw_quota = response.headers.get(RATE_LIMIT_HEADER)
        if raw_quota is None:
            logger.warning(f"{RATE_LIMIT_HEADER} header missing from {url}")
            raise ProtocolError(f"Response is missing the {RATE_LIMIT_HEADER} header.", status_code=status)
        if not _QUOTA_RE.fullmatch(raw_quota):
            logger.warning(f"Invalid {RATE_LIMIT_HEADER} header {raw_quota!r} from {url}")
            raise ProtocolError(f"Invalid {RATE_LIMIT_HEADER} header: {raw_quota!r}", status_code=status)
        quota = int(raw_quota)

        self._remaining_quota = quota
        logger.debug(f"  └─ {status}, {quota} requests remaining")
        return response

    def _get(self, url: str, decoder: Callable[[Any], R]) -> R:
        """GET a URL and decode its JSON body with decoder."""
        response = self._request_with_auth("GET", url)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"Non-JSON response from {url}: {e}")
            raise ProtocolError(f"Response from {url} is not valid JSON: {e}") from e

        try:
            return decoder(data)
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not decode response from {url}: {e}")
            raise ProtocolError(f"Could not decode response from {url}: {e}") from e

    # ------------------------------------------------------------------
    # Photos
    # ------------------------------------------------------------------

    def search_photos(self, query: str, per_page: int, page: int) -> PhotoSearchResult:
        """
        Search photos.

        The query is placed in the URL as given; pre-encode it if it contains
        reserved characters such as '&' or '#'.

        Args:
            query: Search term.
            per_page: Results per page.
            page: Page number.

        Returns:
            PhotoSearchResult for the requested page.
        """
        url = f"{self.photo_api_url}search?query={query}&per_page={per_page}&page={page}"
        return self._get(url, PhotoSearchResult.from_api_response)

    def curated_photos(self, per_page: int, page: int) -> PhotoSearchResult:
        """
        List curated photos.

        The curated feed does not report total_results, so it reads as 0.
        """
        url = f"{self.photo_api_url}curated?per_page={per_page}&page={page}"
        return self._get(url, PhotoSearchResult.from_api_response)

    def get_photo(self, photo_id: int) -> Photo:
        """
        Fetch a single photo by ID.

        Raises:
            NotFoundError: If no photo has this ID.
        """
        url = f"{self.photo_api_url}photos/{photo_id}"
        return self._get(url, Photo.from_api_response)

    def get_random_photo(self) -> Photo:
        """
        Return the first photo of a randomly chosen curated page.

        Raises:
            EmptyResultError: If the chosen page has no photos.
        """
        page = self.random_source.randrange(RANDOM_PAGE_LIMIT)
        result = self.curated_photos(1, page)
        if not result.photos:
            raise EmptyResultError(f"Curated page {page} contains no photos.")
        return result.photos[0]

    # ------------------------------------------------------------------
    # Videos
    # ------------------------------------------------------------------

    def search_videos(self, query: str, per_page: int, page: int) -> VideoSearchResult:
        """
        Search videos.

        The query is placed in the URL as given, as for search_photos().
        """
        url = f"{self.video_api_url}search?query={query}&per_page={per_page}&page={page}"
        return self._get(url, VideoSearchResult.from_api_response)

    def popular_videos(self, per_page: int, page: int) -> VideoSearchResult:
        """List popular videos."""
        url = f"{self.video_api_url}popular?per_page={per_page}&page={page}"
        return self._get(url, VideoSearchResult.from_api_response)

    def get_video(self, video_id: int) -> Video:
        """
        Fetch a single video by ID.

        Raises:
            NotFoundError: If no video has this ID.
        """
        url = f"{self.video_api_url}videos/{video_id}"
        return self._get(url, Video.from_api_response)

    def get_random_video(self) -> Video:
        """
        Return the first video of a randomly chosen popular page.

        Raises:
            EmptyResultError: If the chosen page has no videos.
        """
        page = self.random_source.randrange(RANDOM_PAGE_LIMIT)
        result = self.popular_videos(1, page)
        if not result.videos:
            raise EmptyResultError(f"Popular page {page} contains no videos.")
        return result.videos[0]

    # ------------------------------------------------------------------
    # Quota / lifecycle
    # ------------------------------------------------------------------

    @property
    def remaining_quota(self) -> int:
        """Last observed X-Ratelimit-Remaining value, 0 before any request."""
        return self._remaining_quota

    def get_remaining_quota(self) -> int:
        """Return the remaining request quota from the last successful call."""
        return self._remaining_quota

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def _error_detail(response: requests.Response) -> str:
    """Best short description of an error response for messages."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("error", "message", "code"):
            if body.get(key):
                return str(body[key])
    return response.reason or "no details"
