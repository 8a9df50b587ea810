import logging
from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.dependencies import get_movie_service
from api.schemas import MessageResponse, NonBlankStr
from constants.tmdb import DEFAULT_LANGUAGE, SearchLanguage
from core.exceptions import MovieNotFoundError
from services.movie import MovieService
from services.types import Movie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


class MovieDto(BaseModel):
    id: int
    original_language: str
    original_title: str
    overview: str
    popularity: float
    title: str
    vote_average: float
    vote_count: int
    release_date: date | None = None
    poster_path: str | None = None

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieDto":
        return cls(
            id=movie.id,
            original_language=movie.original_language,
            original_title=movie.original_title,
            overview=movie.overview,
            popularity=movie.popularity,
            title=movie.title,
            vote_average=movie.vote_average,
            vote_count=movie.vote_count,
            release_date=movie.release_date,
            poster_path=movie.poster_path,
        )


class SearchMoviesResponse(BaseModel):
    page: int
    results: list[MovieDto]
    total_pages: int
    total_results: int


@router.get("", response_model=SearchMoviesResponse)
async def search_movies(
    search_term: NonBlankStr = Query(..., min_length=1),
    language: SearchLanguage = Query(...),
    service: MovieService = Depends(get_movie_service),
):
    logger.info(
        "Search movies called - search_term=%s language=%s", search_term, language
    )
    result = await service.search_movies(search_term, language)
    response = SearchMoviesResponse(
        page=result.page,
        results=[MovieDto.from_movie(m) for m in result.results],
        total_pages=result.total_pages,
        total_results=result.total_results,
    )
    logger.info("Search successful - returning %d movies", len(response.results))
    return response


@router.get(
    "/{movie_id}",
    response_model=MovieDto,
    responses={404: {"model": MessageResponse}},
)
async def get_movie(
    movie_id: int,
    language: str = DEFAULT_LANGUAGE,
    service: MovieService = Depends(get_movie_service),
):
    logger.info("Getting movie details - tmdb_id=%s language=%s", movie_id, language)
    try:
        movie = await service.get_movie_by_id(movie_id, language)
    except MovieNotFoundError as e:
        logger.warning("Movie %s not found", movie_id)
        return JSONResponse(status_code=404, content={"message": str(e)})

    logger.info("Retrieved movie %s", movie.title)
    return MovieDto.from_movie(movie)
