"""
Normalizer

Pure mapping from raw TMDB payloads to the stable output models.
No I/O and no hidden state: the same payload always yields the same record.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from ..core.exceptions import UpstreamError
from ..models.movie import (
    CastMember,
    DetailRecord,
    ListItem,
    MAX_CAST,
    UNKNOWN_DIRECTOR,
)

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"


def image_url(path: Optional[str], base: str) -> Optional[str]:
    """Absolute image URL, or None when TMDB has no image."""
    if not path or not isinstance(path, str):
        return None
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def _optional_text(value: Any) -> Optional[str]:
    # TMDB sends "" for unknown release dates
    if value is None or value == "":
        return None
    return str(value)


def _require(raw: Dict[str, Any], *fields: str) -> None:
    missing = [f for f in fields if raw.get(f) is None]
    if missing:
        raise UpstreamError(None, f"Unexpected TMDB payload: missing {', '.join(missing)}")


def to_list_item(raw: Dict[str, Any], image_base: str) -> ListItem:
    if not isinstance(raw, dict):
        raise UpstreamError(None, "Unexpected TMDB payload: list entry is not an object")
    _require(raw, "id")
    try:
        return ListItem(
            id=raw["id"],
            title=raw.get("title") or "",
            poster_url=image_url(raw.get("poster_path"), image_base),
            vote_average=raw.get("vote_average"),
            release_date=_optional_text(raw.get("release_date")),
        )
    except ValidationError as e:
        raise UpstreamError(None, f"Unexpected TMDB payload: {e.error_count()} invalid field(s)")


def to_list_items(payload: Any, image_base: str) -> List[ListItem]:
    """Map a paged list payload (``{"results": [...]}``) to ListItems, order kept."""
    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        raise UpstreamError(None, "Unexpected TMDB payload: missing results list")
    return [to_list_item(raw, image_base) for raw in results]


def select_trailer_key(videos: Optional[Dict[str, Any]]) -> Optional[str]:
    """Key of the first YouTube video typed "Trailer", if any."""
    if not isinstance(videos, dict):
        return None
    for video in videos.get("results") or []:
        if not isinstance(video, dict) or not video.get("key"):
            continue
        if video.get("type") == "Trailer" and video.get("site") == "YouTube":
            return video["key"]
    return None


def trailer_embed_url(key: Optional[str]) -> Optional[str]:
    if not key:
        return None
    return f"{YOUTUBE_EMBED_BASE}{key}"


def select_director(credits: Optional[Dict[str, Any]]) -> str:
    if not isinstance(credits, dict):
        return UNKNOWN_DIRECTOR
    for member in credits.get("crew") or []:
        if not isinstance(member, dict) or member.get("job") != "Director":
            continue
        if isinstance(member.get("name"), str) and member["name"]:
            return member["name"]
    return UNKNOWN_DIRECTOR


def to_cast(credits: Optional[Dict[str, Any]], image_base: str) -> List[CastMember]:
    """First billed cast members. TMDB already orders cast by billing."""
    if not isinstance(credits, dict):
        return []
    billed = [
        member for member in credits.get("cast") or []
        if isinstance(member, dict) and member.get("id") is not None
    ]
    return [
        CastMember(
            id=member["id"],
            name=member.get("name") or "",
            character=member.get("character") or "",
            photo_url=image_url(member.get("profile_path"), image_base),
        )
        for member in billed[:MAX_CAST]
    ]


def credits_summary(
    credits: Optional[Dict[str, Any]], image_base: str
) -> Tuple[List[CastMember], str]:
    """
    Cast and director from a credits payload.

    Raises:
        UpstreamError: an entry does not fit the output model
    """
    try:
        return to_cast(credits, image_base), select_director(credits)
    except ValidationError as e:
        raise UpstreamError(None, f"Unexpected TMDB credits payload: {e.error_count()} invalid field(s)")


def to_detail_record(
    core: Dict[str, Any],
    credits: Optional[Dict[str, Any]],
    videos: Optional[Dict[str, Any]],
    image_base: str,
) -> DetailRecord:
    """
    Build the full movie record.

    ``credits`` and ``videos`` are None when their lookup failed; malformed
    credits degrade the same way. A core payload without id/title is
    rejected so no half-built record escapes.
    """
    if not isinstance(core, dict):
        raise UpstreamError(None, "Unexpected TMDB payload: movie is not an object")
    _require(core, "id", "title")

    try:
        cast, director = credits_summary(credits, image_base)
    except UpstreamError:
        cast, director = [], UNKNOWN_DIRECTOR

    try:
        return DetailRecord(
            id=core["id"],
            title=core["title"],
            overview=core.get("overview") or "",
            release_date=_optional_text(core.get("release_date")),
            poster_url=image_url(core.get("poster_path"), image_base),
            backdrop_url=image_url(core.get("backdrop_path"), image_base),
            vote_average=core.get("vote_average"),
            genres=[
                g["name"] for g in core.get("genres") or []
                if isinstance(g, dict) and g.get("name")
            ],
            runtime_minutes=core.get("runtime"),
            cast=cast,
            director=director,
            trailer_embed_url=trailer_embed_url(select_trailer_key(videos)),
        )
    except ValidationError as e:
        raise UpstreamError(None, f"Unexpected TMDB payload: {e.error_count()} invalid field(s)")
