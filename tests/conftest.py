"""
Pytest Fixtures

Shared TMDB payloads and mocks for testing.
"""

import os

# Settings are cached on first import; pin them before the app is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("TMDB_READ_ACCESS_TOKEN", "test-token")

import pytest
from unittest.mock import AsyncMock, MagicMock
from typing import Any, Dict

from movie_explorer.services.tmdb_client import TMDBClient


@pytest.fixture
def popular_payload() -> Dict[str, Any]:
    """Paged list payload as returned by /movie/popular."""
    return {
        "page": 1,
        "results": [
            {
                "id": 550,
                "title": "Fight Club",
                "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
                "vote_average": 8.4,
                "release_date": "1999-10-15",
            },
            {
                "id": 13,
                "title": "Forrest Gump",
                "poster_path": None,
                "vote_average": 0,
                "release_date": "",
            },
            {
                "id": 680,
                "title": "Pulp Fiction",
                "vote_average": 8.5,
                "release_date": "1994-09-10",
            },
        ],
        "total_pages": 1,
        "total_results": 3,
    }


@pytest.fixture
def movie_payload() -> Dict[str, Any]:
    """Core payload as returned by /movie/{id}."""
    return {
        "id": 27205,
        "title": "Inception",
        "overview": "Cobb steals secrets from dreams.",
        "release_date": "2010-07-15",
        "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
        "backdrop_path": None,
        "vote_average": 8.4,
        "runtime": 148,
        "genres": [
            {"id": 28, "name": "Action"},
            {"id": 878, "name": "Science Fiction"},
        ],
    }


@pytest.fixture
def credits_payload() -> Dict[str, Any]:
    """Credits payload as returned by /movie/{id}/credits."""
    cast = [
        {
            "id": 6193 + i,
            "name": f"Actor {i}",
            "character": f"Role {i}",
            "profile_path": f"/actor{i}.jpg" if i != 1 else None,
            "known_for_department": "Acting",
        }
        for i in range(7)
    ]
    return {
        "id": 27205,
        "cast": cast,
        "crew": [
            {"id": 1, "name": "Hans Zimmer", "job": "Original Music Composer"},
            {"id": 525, "name": "Christopher Nolan", "job": "Director"},
            {"id": 2, "name": "Someone Else", "job": "Director"},
        ],
    }


@pytest.fixture
def videos_payload() -> Dict[str, Any]:
    """Videos payload as returned by /movie/{id}/videos."""
    return {
        "id": 27205,
        "results": [
            {"key": "teaser1", "site": "YouTube", "type": "Teaser"},
            {"key": "vimeo1", "site": "Vimeo", "type": "Trailer"},
            {"key": "YoHD9XEInc0", "site": "YouTube", "type": "Trailer"},
            {"key": "later", "site": "YouTube", "type": "Trailer"},
        ],
    }


@pytest.fixture
def mock_tmdb_client(popular_payload, movie_payload, credits_payload, videos_payload):
    """TMDBClient stand-in with every resource call succeeding."""
    mock = MagicMock(spec=TMDBClient)
    mock.popular = AsyncMock(return_value=popular_payload)
    mock.search = AsyncMock(return_value=popular_payload)
    mock.discover = AsyncMock(return_value=popular_payload)
    mock.trending = AsyncMock(return_value=popular_payload)
    mock.movie = AsyncMock(return_value=movie_payload)
    mock.credits = AsyncMock(return_value=credits_payload)
    mock.videos = AsyncMock(return_value=videos_payload)
    mock.fetch_resource = AsyncMock()
    return mock
