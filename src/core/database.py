from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config import settings


def create_engine(url: str, **kwargs) -> AsyncEngine:
    engine = create_async_engine(url, echo=False, **kwargs)
    if engine.dialect.name == "sqlite":
        # SQLite leaves foreign keys off unless asked, and cascades rely on them
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


engine = create_engine(settings.DATABASE_URL)
async_session = create_session_factory(engine)


async def get_db() -> AsyncIterator[AsyncSession]:
    """One session per request; rolled back if the request fails."""
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
