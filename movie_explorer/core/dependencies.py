"""
Request-scoped Dependencies

Each request gets its own httpx client, TMDB client and aggregator.
Nothing here outlives the request.
"""

from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..config import Settings, get_settings
from ..services.aggregator import CatalogAggregator
from ..services.insights import InsightsService
from ..services.tmdb_client import TMDBClient


async def get_tmdb_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[TMDBClient]:
    """TMDB client bound to a per-request connection pool, closed afterwards."""
    async with httpx.AsyncClient(timeout=settings.tmdb_timeout_seconds) as http_client:
        yield TMDBClient.from_settings(settings, http_client)


def get_aggregator(
    client: TMDBClient = Depends(get_tmdb_client),
    settings: Settings = Depends(get_settings),
) -> CatalogAggregator:
    return CatalogAggregator(client, image_base_url=settings.tmdb_image_base_url)


def get_insights_service(
    client: TMDBClient = Depends(get_tmdb_client),
) -> InsightsService:
    return InsightsService(client)
