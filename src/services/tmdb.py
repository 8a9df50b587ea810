import logging
import time
from datetime import date

import httpx
from pydantic import BaseModel, ValidationError

from core.exceptions import (
    MovieNotFoundError,
    TmdbApiError,
    TmdbDeserializationError,
    TmdbFetchError,
)
from services.types import Movie, SearchResult

logger = logging.getLogger(__name__)


class TmdbMovie(BaseModel):
    id: int
    original_language: str
    original_title: str
    overview: str = ""
    popularity: float
    release_date: str = ""
    title: str
    vote_average: float
    vote_count: int
    poster_path: str | None = None

    def to_movie(self) -> Movie:
        return Movie(
            id=self.id,
            original_language=self.original_language,
            original_title=self.original_title,
            overview=self.overview,
            popularity=self.popularity,
            release_date=_parse_release_date(self.release_date),
            title=self.title,
            vote_average=self.vote_average,
            vote_count=self.vote_count,
            poster_path=self.poster_path,
        )


class TmdbSearchResponse(BaseModel):
    page: int
    results: list[TmdbMovie]
    total_pages: int
    total_results: int

    def to_result(self) -> SearchResult:
        return SearchResult(
            page=self.page,
            total_pages=self.total_pages,
            total_results=self.total_results,
            results=[m.to_movie() for m in self.results],
        )


def _parse_release_date(raw: str) -> date | None:
    # TMDB sends "" for unreleased or undated titles
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError as e:
        raise TmdbDeserializationError(f"Invalid release_date {raw!r}") from e


def _decode(response: httpx.Response, model: type[BaseModel]):
    try:
        data = response.json()
    except ValueError as e:
        raise TmdbDeserializationError("TMDB response is not valid JSON") from e
    if data is None:
        raise TmdbDeserializationError("TMDB response deserialization returned null")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise TmdbDeserializationError(f"Unexpected TMDB response shape: {e}") from e


class TmdbClient:
    def __init__(
        self,
        api_key: str,
        http_client: httpx.AsyncClient,
        base_url: str,
    ):
        self.api_key = api_key
        self.client = http_client
        self.base_url = base_url.rstrip("/")

    async def search_movies(self, search_term: str, language: str) -> SearchResult:
        logger.info(
            "Starting TMDB search - search_term=%s language=%s", search_term, language
        )
        params = {
            "api_key": self.api_key,
            "query": search_term,
            "language": language,
        }

        started = time.perf_counter()
        try:
            response = await self.client.get(f"{self.base_url}/search/movie", params=params)
        except httpx.HTTPError as e:
            logger.error("HTTP error during TMDB search: %s", e)
            raise TmdbFetchError(f"TMDB request failed: {e}") from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "TMDB response received in %.0fms - status=%s",
            elapsed_ms,
            response.status_code,
        )
        if not response.is_success:
            logger.error("TMDB API returned error - status=%s", response.status_code)
            raise TmdbFetchError(
                f"TMDB API returned {response.status_code}",
                status_code=response.status_code,
            )

        result = _decode(response, TmdbSearchResponse).to_result()
        logger.info("Parsed TMDB search response - %d movies", len(result.results))
        return result

    async def get_movie_by_id(self, movie_id: int, language: str = "en") -> Movie:
        logger.info("Fetching TMDB movie %s - language=%s", movie_id, language)
        params = {"api_key": self.api_key, "language": language}

        started = time.perf_counter()
        try:
            response = await self.client.get(
                f"{self.base_url}/movie/{movie_id}", params=params
            )
        except httpx.HTTPError as e:
            logger.error("HTTP error fetching TMDB movie %s: %s", movie_id, e)
            raise TmdbApiError(f"TMDB request failed: {e}") from e
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "TMDB response received in %.0fms - status=%s",
            elapsed_ms,
            response.status_code,
        )
        if response.status_code == 404:
            raise MovieNotFoundError(f"Movie {movie_id} not found")
        if not response.is_success:
            logger.error("TMDB API returned error - status=%s", response.status_code)
            raise TmdbApiError(
                f"TMDB API returned {response.status_code}",
                status_code=response.status_code,
            )

        return _decode(response, TmdbMovie).to_movie()
