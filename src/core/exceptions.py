import enum


class ErrorKind(enum.Enum):
    MOVIE_NOT_FOUND = "movie_not_found"
    PLAYLIST_NOT_FOUND = "playlist_not_found"
    UPSTREAM_API = "upstream_api"
    INVALID_ARGUMENT = "invalid_argument"
    UNCLASSIFIED = "unclassified"


class AppError(Exception):
    """Base class for errors the API knows how to answer."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED


class MovieNotFoundError(AppError):
    kind = ErrorKind.MOVIE_NOT_FOUND


class PlaylistNotFoundError(AppError):
    kind = ErrorKind.PLAYLIST_NOT_FOUND


class TmdbApiError(AppError):
    """TMDB answered with an error status, or could not be reached."""

    kind = ErrorKind.UPSTREAM_API

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidArgumentError(AppError):
    kind = ErrorKind.INVALID_ARGUMENT


class TmdbFetchError(Exception):
    """A TMDB search request failed before a usable body was received."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TmdbDeserializationError(Exception):
    """A TMDB body could not be parsed into the expected shape."""


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, AppError):
        return exc.kind
    return ErrorKind.UNCLASSIFIED
