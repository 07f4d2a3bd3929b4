"""
Tests for the Normalizer

Raw TMDB fixture payloads in, stable output models out.
"""

import pytest

from movie_explorer.core.exceptions import UpstreamError
from movie_explorer.services import normalizer

IMAGE_BASE = "https://image.tmdb.org/t/p/w500"


def test_list_items_keep_count_and_order(popular_payload):
    items = normalizer.to_list_items(popular_payload, IMAGE_BASE)
    assert [i.id for i in items] == [550, 13, 680]


def test_poster_url_null_iff_path_missing(popular_payload):
    items = normalizer.to_list_items(popular_payload, IMAGE_BASE)
    assert items[0].poster_url == f"{IMAGE_BASE}/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg"
    # explicit null and absent key both map to None, never a broken URL
    assert items[1].poster_url is None
    assert items[2].poster_url is None


def test_zero_rating_is_not_unknown(popular_payload):
    items = normalizer.to_list_items(popular_payload, IMAGE_BASE)
    assert items[1].vote_average == 0
    assert items[1].vote_average is not None


def test_missing_rating_stays_null():
    item = normalizer.to_list_item({"id": 1, "title": "No Votes"}, IMAGE_BASE)
    assert item.vote_average is None


def test_empty_release_date_becomes_null(popular_payload):
    items = normalizer.to_list_items(popular_payload, IMAGE_BASE)
    assert items[1].release_date is None


def test_list_item_serializes_camel_case(popular_payload):
    item = normalizer.to_list_items(popular_payload, IMAGE_BASE)[1]
    assert item.model_dump(by_alias=True) == {
        "id": 13,
        "title": "Forrest Gump",
        "posterUrl": None,
        "voteAverage": 0,
        "releaseDate": None,
    }


def test_list_payload_without_results_is_upstream_error():
    with pytest.raises(UpstreamError):
        normalizer.to_list_items({"status_message": "odd"}, IMAGE_BASE)


def test_image_url_handles_slashes():
    assert normalizer.image_url("/a.jpg", "https://img/base/") == "https://img/base/a.jpg"
    assert normalizer.image_url("a.jpg", "https://img/base") == "https://img/base/a.jpg"
    assert normalizer.image_url("", "https://img/base") is None
    assert normalizer.image_url(None, "https://img/base") is None


class TestTrailerSelection:
    """First YouTube 'Trailer' wins; everything else is ignored."""

    def test_first_youtube_trailer(self, videos_payload):
        assert normalizer.select_trailer_key(videos_payload) == "YoHD9XEInc0"

    def test_no_match(self):
        videos = {"results": [{"key": "x", "site": "YouTube", "type": "Teaser"}]}
        assert normalizer.select_trailer_key(videos) is None

    def test_missing_payload(self):
        assert normalizer.select_trailer_key(None) is None

    def test_embed_url_built_once_from_key(self):
        assert normalizer.trailer_embed_url("abc") == "https://www.youtube.com/embed/abc"
        assert normalizer.trailer_embed_url(None) is None


class TestDirectorSelection:

    def test_first_director(self, credits_payload):
        assert normalizer.select_director(credits_payload) == "Christopher Nolan"

    def test_no_director(self):
        assert normalizer.select_director({"crew": [{"name": "X", "job": "Editor"}]}) == "unknown"

    def test_missing_credits(self):
        assert normalizer.select_director(None) == "unknown"


def test_cast_truncated_to_five_in_billing_order(credits_payload):
    cast = normalizer.to_cast(credits_payload, IMAGE_BASE)
    assert [c.name for c in cast] == [f"Actor {i}" for i in range(5)]
    assert cast[0].photo_url == f"{IMAGE_BASE}/actor0.jpg"
    assert cast[1].photo_url is None


def test_detail_record_fully_populated(movie_payload, credits_payload, videos_payload):
    record = normalizer.to_detail_record(movie_payload, credits_payload, videos_payload, IMAGE_BASE)
    body = record.model_dump(by_alias=True)

    assert body["id"] == 27205
    assert body["title"] == "Inception"
    assert body["genres"] == ["Action", "Science Fiction"]
    assert body["runtimeMinutes"] == 148
    assert body["backdropUrl"] is None
    assert body["posterUrl"] == f"{IMAGE_BASE}/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg"
    assert len(body["cast"]) == 5
    assert body["cast"][0] == {
        "id": 6193,
        "name": "Actor 0",
        "character": "Role 0",
        "photoUrl": f"{IMAGE_BASE}/actor0.jpg",
    }
    assert body["director"] == "Christopher Nolan"
    assert body["trailerEmbedUrl"] == "https://www.youtube.com/embed/YoHD9XEInc0"


def test_detail_record_without_supplementary_data(movie_payload):
    record = normalizer.to_detail_record(movie_payload, None, None, IMAGE_BASE)
    assert record.cast == []
    assert record.director == "unknown"
    assert record.trailer_embed_url is None


def test_detail_record_rejects_core_without_title(movie_payload):
    del movie_payload["title"]
    with pytest.raises(UpstreamError):
        normalizer.to_detail_record(movie_payload, None, None, IMAGE_BASE)


def test_normalization_is_deterministic(movie_payload, credits_payload, videos_payload):
    first = normalizer.to_detail_record(movie_payload, credits_payload, videos_payload, IMAGE_BASE)
    second = normalizer.to_detail_record(movie_payload, credits_payload, videos_payload, IMAGE_BASE)
    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_malformed_credits_do_not_hide_the_movie(movie_payload, credits_payload, videos_payload):
    credits_payload["cast"][2]["character"] = {"not": "text"}

    record = normalizer.to_detail_record(movie_payload, credits_payload, videos_payload, IMAGE_BASE)

    assert record.cast == []
    assert record.director == "unknown"
    assert record.trailer_embed_url is not None


def test_credits_summary_rejects_malformed_entries(credits_payload):
    credits_payload["cast"][0]["name"] = 12345
    with pytest.raises(UpstreamError):
        normalizer.credits_summary(credits_payload, IMAGE_BASE)


def test_director_name_must_be_text():
    credits = {"crew": [{"name": 7, "job": "Director"}, {"name": "Real Name", "job": "Director"}]}
    assert normalizer.select_director(credits) == "Real Name"
