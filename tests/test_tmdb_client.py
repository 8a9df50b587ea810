import json
from datetime import date

import httpx
import pytest

from core.exceptions import (
    MovieNotFoundError,
    TmdbApiError,
    TmdbDeserializationError,
    TmdbFetchError,
)
from services.tmdb import TmdbClient

BASE_URL = "https://tmdb.test/3"


def _movie_payload(**overrides) -> dict:
    payload = {
        "id": 27205,
        "original_language": "en",
        "original_title": "Inception",
        "overview": "A thief who steals corporate secrets...",
        "popularity": 83.95,
        "release_date": "2010-07-15",
        "title": "Inception",
        "vote_average": 8.4,
        "vote_count": 35000,
        "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    }
    payload.update(overrides)
    return payload


def _client(handler) -> TmdbClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return TmdbClient(api_key="secret", http_client=http_client, base_url=BASE_URL)


async def test_search_maps_results_and_sends_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={
                "page": 1,
                "results": [
                    _movie_payload(),
                    _movie_payload(id=1, title="Untitled", release_date="", poster_path=None),
                ],
                "total_pages": 3,
                "total_results": 42,
            },
        )

    result = await _client(handler).search_movies("star wars & co", "fr")

    assert seen["path"] == "/3/search/movie"
    assert seen["params"] == {"api_key": "secret", "query": "star wars & co", "language": "fr"}
    assert (result.page, result.total_pages, result.total_results) == (1, 3, 42)
    assert result.results[0].release_date == date(2010, 7, 15)
    assert result.results[0].poster_path == "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg"
    assert result.results[1].release_date is None
    assert result.results[1].poster_path is None


async def test_search_error_status_raises_fetch_error():
    client = _client(lambda request: httpx.Response(401, json={"status_message": "bad key"}))

    with pytest.raises(TmdbFetchError) as exc_info:
        await client.search_movies("alien", "en")
    assert exc_info.value.status_code == 401


@pytest.mark.parametrize(
    "body",
    [
        b"null",
        b"<html>gateway</html>",
        json.dumps({"page": 1, "results": [{"id": 1}], "total_pages": 1, "total_results": 1}).encode(),
        json.dumps({"results": []}).encode(),
    ],
)
async def test_search_bad_body_raises_deserialization_error(body):
    client = _client(lambda request: httpx.Response(200, content=body))

    with pytest.raises(TmdbDeserializationError):
        await client.search_movies("alien", "en")


async def test_search_transport_failure_raises_fetch_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TmdbFetchError) as exc_info:
        await _client(handler).search_movies("alien", "en")
    assert exc_info.value.status_code is None


async def test_get_movie_by_id_maps_movie():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["language"] = request.url.params["language"]
        return httpx.Response(200, json=_movie_payload(overview=""))

    movie = await _client(handler).get_movie_by_id(27205, "fr")

    assert seen == {"path": "/3/movie/27205", "language": "fr"}
    assert movie.id == 27205
    assert movie.overview == ""
    assert movie.vote_count == 35000


async def test_get_movie_by_id_defaults_to_english():
    seen = {}

    def handler(request):
        seen["language"] = request.url.params["language"]
        return httpx.Response(200, json=_movie_payload())

    await _client(handler).get_movie_by_id(27205)
    assert seen["language"] == "en"


async def test_get_movie_by_id_404_raises_not_found():
    client = _client(lambda request: httpx.Response(404, json={"status_code": 34}))

    with pytest.raises(MovieNotFoundError, match="Movie 5 not found"):
        await client.get_movie_by_id(5)


async def test_get_movie_by_id_upstream_error_carries_status():
    client = _client(lambda request: httpx.Response(502))

    with pytest.raises(TmdbApiError) as exc_info:
        await client.get_movie_by_id(5)
    assert exc_info.value.status_code == 502


async def test_get_movie_by_id_timeout_has_no_status():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(TmdbApiError) as exc_info:
        await _client(handler).get_movie_by_id(5)
    assert exc_info.value.status_code is None


async def test_get_movie_by_id_bad_date_raises_deserialization_error():
    client = _client(lambda request: httpx.Response(200, json=_movie_payload(release_date="soon")))

    with pytest.raises(TmdbDeserializationError):
        await client.get_movie_by_id(27205)
