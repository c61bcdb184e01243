# tests/conftest.py
"""
Global pytest fixtures for pexelkit tests.
"""

import random
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def photo_page_data():
    """A search response with one photo and mostly empty sources."""
    return {
        "page": 1,
        "per_page": 2,
        "total_results": 2,
        "photos": [
            {
                "id": 1,
                "width": 100,
                "height": 200,
                "url": "u",
                "photographer": "p",
                "photographer_url": "pu",
                "src": {
                    "original": "o",
                    "large": "l",
                    "large2x": "",
                    "medium": "",
                    "small": "",
                    "portrait": "",
                    "square": "",
                    "landscape": "",
                    "tiny": "",
                },
            }
        ],
    }


@pytest.fixture
def video_data():
    """A single video as returned inside the videos array."""
    return {
        "id": 2499611,
        "width": 1080,
        "height": 1920,
        "url": "https://www.pexels.com/video/2499611/",
        "image": "https://images.pexels.com/videos/2499611/free-video-2499611.jpg",
        "full_res": None,
        "tags": [],
        "duration": 22,
        "user": {"id": 680589, "name": "Joey Farina"},
        "video_files": [
            {
                "id": 125004,
                "quality": "hd",
                "file_type": "video/mp4",
                "width": 1080,
                "height": 1920,
                "fps": 23.976,
                "link": "https://player.vimeo.com/external/342571552.hd.mp4",
            },
            {
                "id": 125005,
                "quality": "sd",
                "file_type": "video/mp4",
                "width": 540,
                "height": 960,
                "link": "https://player.vimeo.com/external/342571552.sd.mp4",
            },
        ],
        "video_pictures": [
            {"id": 308178, "picture": "https://static-videos.pexels.com/pictures/0.jpg", "nr": 0},
            {"id": 308179, "picture": "https://static-videos.pexels.com/pictures/1.jpg", "nr": 1},
        ],
    }


@pytest.fixture
def video_page_data(video_data):
    """A popular-videos response with one video."""
    return {
        "page": 1,
        "per_page": 1,
        "total_results": 8000,
        "url": "https://www.pexels.com/videos/",
        "videos": [video_data],
    }


@pytest.fixture
def make_response():
    """Build a fake requests.Response."""

    def _make(json_data=None, status_code=200, quota="4999", json_error=None, reason="OK"):
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        response.headers = {} if quota is None else {"X-Ratelimit-Remaining": quota}
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make


@pytest.fixture
def mock_session():
    """A MagicMock standing in for requests.Session."""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(mock_session):
    """An APIClient wired to mock_session with a seeded random source."""
    from pexelkit import APIClient

    return APIClient(token="test-token", session=mock_session, random_source=random.Random(42))
