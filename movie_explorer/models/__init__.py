"""Pydantic models for Movie Explorer API."""

from .intent import (
    IntentType,
    Intent,
    PopularIntent,
    SearchIntent,
    DiscoverIntent,
    DetailIntent,
    parse_intent,
)
from .movie import ListItem, CastMember, DetailRecord, ActorCount, WordCount

__all__ = [
    "IntentType",
    "Intent",
    "PopularIntent",
    "SearchIntent",
    "DiscoverIntent",
    "DetailIntent",
    "parse_intent",
    "ListItem",
    "CastMember",
    "DetailRecord",
    "ActorCount",
    "WordCount",
]
