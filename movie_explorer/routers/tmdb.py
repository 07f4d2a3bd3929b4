"""
TMDB Proxy Router

Single endpoint the browsing UI talks to:

    GET /api/tmdb?type=popular[&page=N]
    GET /api/tmdb?type=search&query=...[&page=N]
    GET /api/tmdb?type=discover[&with_genres=..&vote_average.gte=..&...][&page=N]
    GET /api/tmdb?type=detail&id=N      (type=movie is accepted too)

Lists come back as a JSON array of items, detail as a single object.
Failures are JSON error bodies produced by the registered exception handlers.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response

from ..core.dependencies import get_aggregator
from ..core.logging import get_logger
from ..core.rate_limit import DEFAULT_LIMIT, limiter
from ..models.intent import parse_intent
from ..services.aggregator import CatalogAggregator

logger = get_logger(__name__)

router = APIRouter(prefix="/api/tmdb", tags=["tmdb"])


@router.get("")
@limiter.limit(DEFAULT_LIMIT)
async def tmdb_proxy(
    request: Request,
    aggregator: CatalogAggregator = Depends(get_aggregator),
) -> Any:
    """
    Resolve a catalog request.

    Parsing happens before any upstream call: a malformed request is
    answered with 400 and TMDB is never contacted.
    """
    intent = parse_intent(request.query_params)
    logger.info("tmdb_proxy_request", intent=type(intent).__name__, **intent.model_dump())

    result = await aggregator.resolve(intent)

    if isinstance(result, list):
        return [item.model_dump(by_alias=True) for item in result]
    return result.model_dump(by_alias=True)


@router.options("")
async def tmdb_proxy_options() -> Response:
    """Preflight without CORS request headers still gets a bare 200."""
    return Response(status_code=200)
