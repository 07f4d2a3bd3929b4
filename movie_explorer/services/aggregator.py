"""
Catalog Aggregator

Turns an Intent into normalized output by issuing the TMDB calls it needs.

List intents are one call each. A detail lookup fans out to three
independent calls (movie, credits, videos) and joins them:

    movie   -> mandatory, its failure fails the request
    credits -> best-effort, failure or a malformed payload gives empty
               cast / unknown director
    videos  -> best-effort, failure gives no trailer
"""

import asyncio
from typing import Any, List, Optional, Union

from ..core.exceptions import UpstreamError, UpstreamFailure
from ..core.logging import get_logger
from ..models.intent import (
    DetailIntent,
    DiscoverIntent,
    Intent,
    PopularIntent,
    SearchIntent,
)
from ..models.movie import DetailRecord, ListItem
from .normalizer import credits_summary, to_detail_record, to_list_items
from .tmdb_client import TMDBClient

logger = get_logger(__name__)


class CatalogAggregator:
    """Resolves one Intent per call. Holds no per-request state."""

    def __init__(self, client: TMDBClient, image_base_url: str):
        self.client = client
        self.image_base_url = image_base_url

    async def resolve(self, intent: Intent) -> Union[List[ListItem], DetailRecord]:
        """
        Resolve an intent.

        Raises:
            UpstreamFailure: the mandatory call failed
        """
        if isinstance(intent, DetailIntent):
            return await self.movie_detail(intent.item_id)

        if isinstance(intent, PopularIntent):
            payload = await self.client.popular(page=intent.page)
        elif isinstance(intent, SearchIntent):
            payload = await self.client.search(intent.query, page=intent.page)
        elif isinstance(intent, DiscoverIntent):
            payload = await self.client.discover(intent.filters, page=intent.page)
        else:
            raise TypeError(f"Unsupported intent: {type(intent).__name__}")

        items = to_list_items(payload, self.image_base_url)
        logger.info("list_resolved", intent=type(intent).__name__, count=len(items))
        return items

    async def movie_detail(self, movie_id: int) -> DetailRecord:
        core, credits, videos = await asyncio.gather(
            self.client.movie(movie_id),
            self.client.credits(movie_id),
            self.client.videos(movie_id),
            return_exceptions=True,
        )

        if isinstance(core, BaseException):
            raise core

        credits = self._best_effort(credits, "detail_credits_unavailable", movie_id)
        if credits is not None:
            try:
                credits_summary(credits, self.image_base_url)
            except UpstreamError as e:
                logger.warning("detail_credits_unavailable", movie_id=movie_id, code=e.code, error=e.message)
                credits = None
        videos = self._best_effort(videos, "detail_videos_unavailable", movie_id)

        record = to_detail_record(core, credits, videos, self.image_base_url)
        logger.info(
            "detail_resolved",
            movie_id=movie_id,
            has_credits=credits is not None,
            has_trailer=record.trailer_embed_url is not None,
        )
        return record

    @staticmethod
    def _best_effort(result: Any, event: str, movie_id: int) -> Optional[Any]:
        """Downgrade a classified upstream failure to None; re-raise anything else."""
        if isinstance(result, UpstreamFailure):
            logger.warning(event, movie_id=movie_id, code=result.code, error=result.message)
            return None
        if isinstance(result, BaseException):
            raise result
        return result
