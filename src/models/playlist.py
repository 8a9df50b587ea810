from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base


class Playlist(Base):
    __tablename__ = "Playlists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    movies: Mapped[list["PlaylistMovie"]] = relationship(
        back_populates="playlist",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
        order_by=lambda: [PlaylistMovie.added_at, PlaylistMovie.id],
    )


class PlaylistMovie(Base):
    __tablename__ = "PlaylistMovies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tmdb_id: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    playlist_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("Playlists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    playlist: Mapped["Playlist"] = relationship(back_populates="movies")
