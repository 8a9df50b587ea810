from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db
from repositories.playlist import PlaylistRepository
from services.movie import MovieService
from services.tmdb import TmdbClient


def get_movie_service(request: Request) -> MovieService:
    settings = request.app.state.settings
    client = TmdbClient(
        api_key=settings.TMDB_API_KEY,
        http_client=request.app.state.http_client,
        base_url=settings.TMDB_BASE_URL,
    )
    return MovieService(client)


def get_playlist_repository(db: AsyncSession = Depends(get_db)) -> PlaylistRepository:
    return PlaylistRepository(db)
