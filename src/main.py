import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.health import router as health_router
from api.movies import router as movies_router
from api.playlists import router as playlists_router
from config import settings
from core.database import engine
from core.error_handling import ExceptionHandlingMiddleware, validation_exception_handler
from models import Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Environment loaded: %s (TMDB_API_KEY=********)", settings.ENVIRONMENT
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.http_client = httpx.AsyncClient(timeout=settings.TMDB_TIMEOUT_SECONDS)
    logger.info(
        "TMDB client ready: base_url=%s timeout=%ss",
        settings.TMDB_BASE_URL,
        settings.TMDB_TIMEOUT_SECONDS,
    )

    yield
    await app.state.http_client.aclose()
    await engine.dispose()


app = FastAPI(
    title="MovieApp API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.is_development else None,
)
app.state.settings = settings

app.add_middleware(ExceptionHandlingMiddleware)

# CORS: local front-end dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(health_router)
app.include_router(movies_router)
app.include_router(playlists_router)
