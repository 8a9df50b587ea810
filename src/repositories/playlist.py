import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import PlaylistNotFoundError
from models.playlist import Playlist, PlaylistMovie

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlaylistRepository:
    """Playlist persistence.

    Every mutating call commits exactly once, so the row changes it makes and the
    parent's ``updated_at`` refresh land in the same transaction.
    """

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock

    async def list_all(self) -> list[Playlist]:
        stmt = select(Playlist).order_by(Playlist.created_at.desc(), Playlist.id.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, playlist_id: int) -> Playlist | None:
        return await self.db.get(Playlist, playlist_id)

    async def create(self, name: str) -> Playlist:
        logger.info("Creating new playlist: %s", name)
        now = self.clock()
        playlist = Playlist(name=name, created_at=now, updated_at=now, movies=[])
        self.db.add(playlist)
        await self._commit()
        return playlist

    async def add_movie(self, playlist_id: int, tmdb_id: int, title: str) -> PlaylistMovie:
        playlist = await self.db.get(Playlist, playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        now = self.clock()
        movie = PlaylistMovie(tmdb_id=tmdb_id, title=title, added_at=now)
        playlist.movies.append(movie)
        playlist.updated_at = now
        await self._commit()
        return movie

    async def remove_movie(self, playlist_id: int, tmdb_id: int) -> bool:
        # Duplicates are allowed; the earliest added entry goes first
        stmt = (
            select(PlaylistMovie)
            .where(
                PlaylistMovie.playlist_id == playlist_id,
                PlaylistMovie.tmdb_id == tmdb_id,
            )
            .order_by(PlaylistMovie.id)
            .limit(1)
        )
        movie = await self.db.scalar(stmt)
        if movie is None:
            return False

        playlist = await self.db.get(Playlist, playlist_id)
        await self.db.delete(movie)
        if playlist is not None:
            if movie in playlist.movies:
                playlist.movies.remove(movie)
            playlist.updated_at = self.clock()
        await self._commit()
        return True

    async def update(self, playlist_id: int, new_name: str) -> Playlist:
        playlist = await self.db.get(Playlist, playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(f"Playlist {playlist_id} not found")

        logger.info("Updating playlist %s name to %s", playlist_id, new_name)
        playlist.name = new_name
        playlist.updated_at = self.clock()
        await self._commit()
        return playlist

    async def delete(self, playlist_id: int) -> bool:
        playlist = await self.db.get(Playlist, playlist_id)
        if playlist is None:
            return False

        await self.db.delete(playlist)
        await self._commit()
        logger.info("Deleted playlist %s", playlist_id)
        return True

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
