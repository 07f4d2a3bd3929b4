"""
Request Intents

The typed form of what a caller asks for. Built once per request from the
raw query string; invalid combinations are rejected here, before any
upstream call is made.
"""

from enum import Enum
from typing import Dict, Mapping, Union
from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import InvalidRequestError


class IntentType(str, Enum):
    """Values accepted for the ``type`` query parameter."""
    POPULAR = "popular"
    SEARCH = "search"
    DISCOVER = "discover"
    DETAIL = "detail"
    MOVIE = "movie"  # legacy alias of DETAIL


# Discover filters forwarded upstream. Anything else is dropped.
FILTER_KEYS = (
    "with_genres",
    "vote_average.gte",
    "vote_average.lte",
    "primary_release_year",
    "sort_by",
    "with_original_language",
    "language",
)


class PopularIntent(BaseModel):
    """Popular movies list."""
    page: int = Field(default=1, ge=1)

    model_config = ConfigDict(frozen=True)


class SearchIntent(BaseModel):
    """Free-text title search."""
    query: str = Field(..., min_length=1)
    page: int = Field(default=1, ge=1)

    model_config = ConfigDict(frozen=True)


class DiscoverIntent(BaseModel):
    """
    Filtered discovery.

    ``filters`` only ever holds non-empty values; an empty parameter sent
    upstream would act as a constraint rather than "unset".
    """
    filters: Dict[str, str] = Field(default_factory=dict)
    page: int = Field(default=1, ge=1)

    model_config = ConfigDict(frozen=True)


class DetailIntent(BaseModel):
    """Single movie with credits and trailer."""
    item_id: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


Intent = Union[PopularIntent, SearchIntent, DiscoverIntent, DetailIntent]


def parse_positive_int(params: Mapping[str, str], field: str, default: int) -> int:
    """Read an optional positive integer parameter."""
    raw = params.get(field)
    if raw is None or raw.strip() == "":
        return default
    return require_positive_int(params, field)


def require_positive_int(params: Mapping[str, str], field: str) -> int:
    """Read a required positive integer parameter."""
    raw = (params.get(field) or "").strip()
    if not raw:
        raise InvalidRequestError(field, f"Missing required parameter: {field}")
    try:
        value = int(raw)
    except ValueError:
        raise InvalidRequestError(field, f"Parameter '{field}' must be an integer")
    if value < 1:
        raise InvalidRequestError(field, f"Parameter '{field}' must be a positive integer")
    return value


def build_filter_set(params: Mapping[str, str]) -> Dict[str, str]:
    """Pick the recognised discover filters, omitting empty values."""
    filters: Dict[str, str] = {}
    for key in FILTER_KEYS:
        value = params.get(key)
        if value is None:
            continue
        value = value.strip()
        if value:
            filters[key] = value
    return filters


def parse_intent(params: Mapping[str, str]) -> Intent:
    """
    Validate raw query parameters into an Intent.

    Raises:
        InvalidRequestError: naming the missing or invalid field
    """
    raw_type = (params.get("type") or "").strip().lower()
    if not raw_type:
        raise InvalidRequestError("type", "Missing required parameter: type")
    try:
        intent_type = IntentType(raw_type)
    except ValueError:
        raise InvalidRequestError("type", f"Unsupported request type: {raw_type}")

    if intent_type in (IntentType.DETAIL, IntentType.MOVIE):
        return DetailIntent(item_id=require_positive_int(params, "id"))

    page = parse_positive_int(params, "page", default=1)

    if intent_type == IntentType.POPULAR:
        return PopularIntent(page=page)

    if intent_type == IntentType.SEARCH:
        query = (params.get("query") or "").strip()
        if not query:
            raise InvalidRequestError("query", "Missing required parameter: query")
        return SearchIntent(query=query, page=page)

    return DiscoverIntent(filters=build_filter_set(params), page=page)
