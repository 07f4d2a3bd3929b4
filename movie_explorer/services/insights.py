"""
Insights Service

Small aggregate views computed on the fly from TMDB data:
- which actors are most often top-billed in a genre
- which words dominate this week's trending overviews
"""

import asyncio
import re
from collections import Counter
from typing import Iterable, List

from ..core.exceptions import UpstreamError, UpstreamFailure
from ..core.logging import get_logger
from ..models.movie import ActorCount, WordCount
from .tmdb_client import TMDBClient

logger = get_logger(__name__)

DEFAULT_GENRE_ID = 28  # Action
MOVIES_PER_GENRE_SAMPLE = 10
TOP_BILLED = 3
MIN_WORD_LENGTH = 3

STOP_WORDS = frozenset({
    "is", "the", "a", "an", "and", "to", "of", "in", "it", "for", "on",
    "with", "from", "as", "but", "by", "that", "this", "he", "she", "they",
    "what", "who", "when", "where", "why", "how",
})

# ASCII words only; Hangul and other scripts in ko-KR overviews are not counted
_WORD_RE = re.compile(r"\b\w+\b", re.ASCII)


def _top(counts: Counter, limit: int) -> List[tuple]:
    # Counter.most_common keeps first-seen order among equal counts
    return counts.most_common(limit)


def count_top_billed_actors(credit_payloads: Iterable[dict], limit: int) -> List[ActorCount]:
    """Count actors among the first billed cast of each movie."""
    counts: Counter = Counter()
    for credits in credit_payloads:
        for member in (credits.get("cast") or [])[:TOP_BILLED]:
            if member.get("known_for_department") == "Acting" and member.get("name"):
                counts[member["name"]] += 1
    return [ActorCount(name=name, count=count) for name, count in _top(counts, limit)]


def count_overview_words(overviews: Iterable[str], limit: int) -> List[WordCount]:
    """Word frequencies across overviews, minus stop words and short words."""
    text = " ".join(o for o in overviews if o).lower()
    counts: Counter = Counter(
        word for word in _WORD_RE.findall(text)
        if word not in STOP_WORDS and len(word) >= MIN_WORD_LENGTH
    )
    return [WordCount(word=word, count=count) for word, count in _top(counts, limit)]


class InsightsService:
    """Computes insights for one request against an injected TMDB client."""

    def __init__(self, client: TMDBClient):
        self.client = client

    async def top_actors_by_genre(self, genre_id: int = DEFAULT_GENRE_ID, limit: int = 5) -> List[ActorCount]:
        """
        Most frequently top-billed actors among a genre's popular movies.

        Credits lookups are best-effort: a movie whose credits cannot be
        fetched is skipped.
        """
        payload = await self.client.discover(
            {"with_genres": str(genre_id)},
            page=1,
            sort_by="popularity.desc",
        )
        movies = _results(payload)[:MOVIES_PER_GENRE_SAMPLE]

        responses = await asyncio.gather(
            *(self.client.credits(movie["id"]) for movie in movies if movie.get("id") is not None),
            return_exceptions=True,
        )

        credit_payloads = []
        for response in responses:
            if isinstance(response, UpstreamFailure):
                logger.warning("insights_credits_skipped", code=response.code, error=response.message)
                continue
            if isinstance(response, BaseException):
                raise response
            if isinstance(response, dict):
                credit_payloads.append(response)

        actors = count_top_billed_actors(credit_payloads, limit)
        logger.info(
            "insights_top_actors",
            genre_id=genre_id,
            movies=len(movies),
            credits=len(credit_payloads),
            actors=len(actors),
        )
        return actors

    async def trending_overview_summary(self, limit: int = 5) -> List[WordCount]:
        """Most frequent words across this week's trending movie overviews."""
        payload = await self.client.trending("week")
        overviews = [movie.get("overview") or "" for movie in _results(payload)]
        words = count_overview_words(overviews, limit)
        logger.info("insights_trending_words", movies=len(overviews), words=len(words))
        return words


def _results(payload) -> List[dict]:
    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise UpstreamError(None, "Unexpected TMDB payload: missing results list")
    return [r for r in results if isinstance(r, dict)]
