"""
Movie Models

Stable output contracts returned to the client. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict

UNKNOWN_DIRECTOR = "unknown"
MAX_CAST = 5


class ListItem(BaseModel):
    """Summary row used by popular/search/discover lists."""
    id: int
    title: str
    poster_url: Optional[str] = Field(None, alias="posterUrl")
    vote_average: Optional[float] = Field(None, alias="voteAverage")
    release_date: Optional[str] = Field(None, alias="releaseDate")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CastMember(BaseModel):
    """Billed cast entry."""
    id: int
    name: str
    character: str = ""
    photo_url: Optional[str] = Field(None, alias="photoUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DetailRecord(BaseModel):
    """
    Full movie page payload.

    Only ever built from a successful core lookup; credits and trailer are
    best-effort and fall back to an empty cast, ``"unknown"`` director and
    no trailer.
    """
    id: int
    title: str
    overview: str = ""
    release_date: Optional[str] = Field(None, alias="releaseDate")
    poster_url: Optional[str] = Field(None, alias="posterUrl")
    backdrop_url: Optional[str] = Field(None, alias="backdropUrl")
    vote_average: Optional[float] = Field(None, alias="voteAverage")
    genres: List[str] = Field(default_factory=list)
    runtime_minutes: Optional[int] = Field(None, alias="runtimeMinutes")
    cast: List[CastMember] = Field(default_factory=list, max_length=MAX_CAST)
    director: str = UNKNOWN_DIRECTOR
    trailer_embed_url: Optional[str] = Field(None, alias="trailerEmbedUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ActorCount(BaseModel):
    """How often an actor is top-billed within a genre sample."""
    name: str
    count: int


class WordCount(BaseModel):
    """Word frequency across trending overviews."""
    word: str
    count: int
