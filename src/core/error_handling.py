import logging

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.exceptions import ErrorKind, classify

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAILS = "An unexpected error occurred"
DEFAULT_UPSTREAM_STATUS = 503


def error_response(exc: Exception) -> JSONResponse:
    """Map an exception to its status code and ``{message, details}`` body."""
    match classify(exc):
        case ErrorKind.MOVIE_NOT_FOUND:
            status, message, details = 404, "Movie not found", str(exc)
        case ErrorKind.PLAYLIST_NOT_FOUND:
            status, message, details = 404, "Playlist not found", str(exc)
        case ErrorKind.UPSTREAM_API:
            status = getattr(exc, "status_code", None) or DEFAULT_UPSTREAM_STATUS
            message, details = "TMDB API error", str(exc)
        case ErrorKind.INVALID_ARGUMENT:
            status, message, details = 400, "Invalid argument", str(exc)
        case _:
            status, message, details = 500, "Internal server error", GENERIC_ERROR_DETAILS

    return JSONResponse(
        status_code=status,
        content={"message": message, "details": details},
    )


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled %s on %s %s",
                type(exc).__name__,
                request.method,
                request.url.path,
            )
            return error_response(exc)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = _format_validation_errors(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid argument", "details": details},
    )
