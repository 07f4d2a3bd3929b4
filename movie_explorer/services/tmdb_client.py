"""
TMDB Client

Authenticated single-resource calls to the TMDB v3 API.
Every failure is classified into the upstream taxonomy in core.exceptions;
nothing from httpx leaks past this module.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from ..config import Settings
from ..core.exceptions import (
    NotFoundError,
    RateLimitedError,
    UnauthorizedError,
    UpstreamError,
)
from ..core.logging import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to fetch data from TMDB."


@dataclass(frozen=True)
class TMDBCredential:
    """
    How requests are authenticated.

    A read access token is sent as a bearer header; an API key travels
    in the query string. The token wins when both are configured.
    """
    bearer_token: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["TMDBCredential"]:
        if settings.tmdb_read_access_token:
            return cls(bearer_token=settings.tmdb_read_access_token)
        if settings.tmdb_api_key:
            return cls(api_key=settings.tmdb_api_key)
        return None

    def headers(self) -> Dict[str, str]:
        if self.bearer_token:
            return {"Authorization": f"Bearer {self.bearer_token}"}
        return {}

    def query(self) -> Dict[str, str]:
        if not self.bearer_token and self.api_key:
            return {"api_key": self.api_key}
        return {}


class TMDBClient:
    """
    Thin async wrapper over one ``httpx.AsyncClient``.

    The HTTP client is injected and owned by the caller; this class never
    opens or closes it. No retries, no caching.
    """

    def __init__(
        self,
        credential: Optional[TMDBCredential],
        http_client: httpx.AsyncClient,
        base_url: str = "https://api.themoviedb.org/3",
        language: str = "ko-KR",
        video_language: str = "en-US",
    ):
        self.credential = credential
        self.http = http_client
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.video_language = video_language

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient) -> "TMDBClient":
        return cls(
            credential=TMDBCredential.from_settings(settings),
            http_client=http_client,
            base_url=settings.tmdb_base_url,
            language=settings.tmdb_language,
            video_language=settings.tmdb_video_language,
        )

    async def fetch_resource(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """
        GET ``path`` and return the decoded JSON body.

        Raises:
            UnauthorizedError: no credential configured (no call is made)
            RateLimitedError: upstream answered 429
            NotFoundError: upstream answered 404
            UpstreamError: any other non-2xx, timeout, transport or decode failure
        """
        if self.credential is None:
            logger.error("tmdb_credential_missing", path=path)
            raise UnauthorizedError()

        query: Dict[str, Any] = dict(params or {})
        query.update(self.credential.query())
        url = f"{self.base_url}/{path.lstrip('/')}"

        logger.debug("tmdb_request", path=path, params=dict(params or {}))

        try:
            response = await self.http.get(url, params=query, headers=self.credential.headers())
        except httpx.TimeoutException as e:
            logger.warning("tmdb_request_failed", path=path, reason="timeout", error=str(e))
            raise UpstreamError(None, "TMDB request timed out.")
        except httpx.HTTPError as e:
            logger.warning("tmdb_request_failed", path=path, reason="transport", error=str(e))
            raise UpstreamError(None, f"TMDB request failed: {e}")

        if response.is_success:
            try:
                return response.json()
            except ValueError:
                logger.warning("tmdb_request_failed", path=path, reason="invalid_json")
                raise UpstreamError(response.status_code, "TMDB returned a non-JSON response.")

        status = response.status_code
        logger.warning("tmdb_request_failed", path=path, status=status)

        if status == 429:
            raise RateLimitedError()
        if status == 404:
            raise NotFoundError(path)
        raise UpstreamError(status, self._status_message(response))

    @staticmethod
    def _status_message(response: httpx.Response) -> str:
        """TMDB error bodies look like {"status_code": 7, "status_message": "..."}."""
        try:
            body = response.json()
        except ValueError:
            return GENERIC_FAILURE_MESSAGE
        if isinstance(body, dict) and body.get("status_message"):
            return str(body["status_message"])
        return GENERIC_FAILURE_MESSAGE

    # --- Resources ---

    async def popular(self, page: int = 1) -> Any:
        return await self.fetch_resource(
            "/movie/popular", {"language": self.language, "page": page}
        )

    async def search(self, query: str, page: int = 1) -> Any:
        return await self.fetch_resource(
            "/search/movie", {"query": query, "language": self.language, "page": page}
        )

    async def discover(self, filters: Mapping[str, str], page: int = 1, **extra: Any) -> Any:
        """Discover movies. A ``language`` filter overrides the catalog language."""
        params: Dict[str, Any] = {"language": self.language, "page": page}
        params.update(extra)
        params.update(filters)
        return await self.fetch_resource("/discover/movie", params)

    async def movie(self, movie_id: int) -> Any:
        return await self.fetch_resource(f"/movie/{movie_id}", {"language": self.language})

    async def credits(self, movie_id: int) -> Any:
        return await self.fetch_resource(
            f"/movie/{movie_id}/credits", {"language": self.language}
        )

    async def videos(self, movie_id: int) -> Any:
        return await self.fetch_resource(
            f"/movie/{movie_id}/videos", {"language": self.video_language}
        )

    async def trending(self, window: str = "week") -> Any:
        return await self.fetch_resource(
            f"/trending/movie/{window}", {"language": self.language}
        )
