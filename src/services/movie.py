import logging

from services.tmdb import TmdbClient
from services.types import Movie, SearchResult

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, fetch_client: TmdbClient):
        self.fetch_client = fetch_client

    async def search_movies(self, search_term: str, language: str) -> SearchResult:
        logger.info(
            "MovieService: starting search - search_term=%s language=%s",
            search_term,
            language,
        )
        try:
            result = await self.fetch_client.search_movies(search_term, language)
        except Exception:
            logger.error("MovieService: error during search")
            raise

        logger.info(
            "MovieService: search completed - %s total results, page %s/%s",
            result.total_results,
            result.page,
            result.total_pages,
        )
        return result

    async def get_movie_by_id(self, movie_id: int, language: str = "en") -> Movie:
        logger.info("MovieService: getting movie %s - language=%s", movie_id, language)
        return await self.fetch_client.get_movie_by_id(movie_id, language)
