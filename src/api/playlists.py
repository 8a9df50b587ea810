import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_playlist_repository
from api.schemas import MessageResponse, NonBlankStr
from core.exceptions import PlaylistNotFoundError
from models.playlist import Playlist, PlaylistMovie
from repositories.playlist import PlaylistRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/playlists", tags=["playlists"])

PLAYLIST_NOT_FOUND = {"message": "Playlist not found"}


class CreatePlaylistRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: NonBlankStr = Field(alias="Name", min_length=1, max_length=100)


class UpdatePlaylistRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: NonBlankStr = Field(alias="Name", min_length=1, max_length=100)


class AddMovieRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tmdb_id: int = Field(alias="TmdbId")
    title: NonBlankStr = Field(alias="Title", min_length=1, max_length=200)


class PlaylistMovieResponse(BaseModel):
    id: int
    tmdb_id: int
    title: str
    added_at: datetime


class PlaylistResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    movie_count: int
    movies: list[PlaylistMovieResponse]


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _movie_to_response(movie: PlaylistMovie) -> PlaylistMovieResponse:
    return PlaylistMovieResponse(
        id=movie.id,
        tmdb_id=movie.tmdb_id,
        title=movie.title,
        added_at=_as_utc(movie.added_at),
    )


def _to_response(playlist: Playlist) -> PlaylistResponse:
    movies = [_movie_to_response(m) for m in playlist.movies]
    return PlaylistResponse(
        id=playlist.id,
        name=playlist.name,
        created_at=_as_utc(playlist.created_at),
        movie_count=len(movies),
        movies=movies,
    )


@router.get("", response_model=list[PlaylistResponse])
async def list_playlists(repo: PlaylistRepository = Depends(get_playlist_repository)):
    logger.info("Getting all playlists")
    playlists = await repo.list_all()
    return [_to_response(p) for p in playlists]


@router.get(
    "/{playlist_id}",
    response_model=PlaylistResponse,
    responses={404: {"model": MessageResponse}},
)
async def get_playlist(
    playlist_id: int,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    playlist = await repo.get_by_id(playlist_id)
    if playlist is None:
        return JSONResponse(status_code=404, content=PLAYLIST_NOT_FOUND)
    return _to_response(playlist)


@router.post("", response_model=PlaylistResponse, status_code=201)
async def create_playlist(
    body: CreatePlaylistRequest,
    response: Response,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    playlist = await repo.create(body.name)
    response.headers["Location"] = f"{router.prefix}/{playlist.id}"
    return _to_response(playlist)


@router.post(
    "/{playlist_id}/movies",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
)
async def add_movie(
    playlist_id: int,
    body: AddMovieRequest,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    try:
        await repo.add_movie(playlist_id, body.tmdb_id, body.title)
    except PlaylistNotFoundError:
        logger.warning("Cannot add movie: playlist %s not found", playlist_id)
        return JSONResponse(status_code=404, content=PLAYLIST_NOT_FOUND)

    logger.info("Added movie '%s' to playlist %s", body.title, playlist_id)
    return {"message": "Movie added successfully"}


@router.put(
    "/{playlist_id}",
    response_model=PlaylistResponse,
    responses={404: {"model": MessageResponse}},
)
async def update_playlist(
    playlist_id: int,
    body: UpdatePlaylistRequest,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    logger.info("Updating playlist %s with new name: %s", playlist_id, body.name)
    try:
        playlist = await repo.update(playlist_id, body.name)
    except PlaylistNotFoundError:
        logger.warning("Playlist %s not found", playlist_id)
        return JSONResponse(status_code=404, content=PLAYLIST_NOT_FOUND)
    return _to_response(playlist)


@router.delete(
    "/{playlist_id}",
    status_code=204,
    responses={404: {"model": MessageResponse}},
)
async def delete_playlist(
    playlist_id: int,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    if not await repo.delete(playlist_id):
        return JSONResponse(status_code=404, content=PLAYLIST_NOT_FOUND)
    return Response(status_code=204)


@router.delete(
    "/{playlist_id}/movies/{tmdb_id}",
    status_code=204,
    responses={404: {"model": MessageResponse}},
)
async def remove_movie(
    playlist_id: int,
    tmdb_id: int,
    repo: PlaylistRepository = Depends(get_playlist_repository),
):
    logger.info("Removing movie %s from playlist %s", tmdb_id, playlist_id)
    if not await repo.remove_movie(playlist_id, tmdb_id):
        logger.warning("Movie %s not found in playlist %s", tmdb_id, playlist_id)
        return JSONResponse(
            status_code=404, content={"message": "Movie not found in playlist"}
        )
    return Response(status_code=204)
