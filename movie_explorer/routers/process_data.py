"""
Data Processing Router

Aggregate views over TMDB data:

    GET /api/process_data?type=top_actors_by_genre[&genre_id=28][&limit=5]
    GET /api/process_data?type=trending_overview_summary[&limit=5]
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, Response

from ..core.dependencies import get_insights_service
from ..core.exceptions import InvalidRequestError
from ..core.logging import get_logger
from ..core.rate_limit import DEFAULT_LIMIT, limiter
from ..models.intent import parse_positive_int
from ..services.insights import DEFAULT_GENRE_ID, InsightsService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/process_data", tags=["insights"])

TOP_ACTORS_BY_GENRE = "top_actors_by_genre"
TRENDING_OVERVIEW_SUMMARY = "trending_overview_summary"
DEFAULT_RESULT_LIMIT = 5


@router.get("")
@limiter.limit(DEFAULT_LIMIT)
async def process_data(
    request: Request,
    insights: InsightsService = Depends(get_insights_service),
) -> List[Dict[str, Any]]:
    params = request.query_params
    process_type = (params.get("type") or "").strip()
    limit = parse_positive_int(params, "limit", default=DEFAULT_RESULT_LIMIT)

    logger.info("process_data_request", type=process_type, limit=limit)

    if process_type == TOP_ACTORS_BY_GENRE:
        genre_id = parse_positive_int(params, "genre_id", default=DEFAULT_GENRE_ID)
        rows = await insights.top_actors_by_genre(genre_id=genre_id, limit=limit)
    elif process_type == TRENDING_OVERVIEW_SUMMARY:
        rows = await insights.trending_overview_summary(limit=limit)
    else:
        raise InvalidRequestError("type", "Invalid process type.")

    return [row.model_dump() for row in rows]


@router.options("")
async def process_data_options() -> Response:
    return Response(status_code=200)
