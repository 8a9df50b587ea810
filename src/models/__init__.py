from models.base import Base
from models.playlist import Playlist, PlaylistMovie

__all__ = ["Base", "Playlist", "PlaylistMovie"]
