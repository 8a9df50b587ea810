import os

# Set env vars BEFORE any imports from the project happen
os.environ.setdefault("TMDB_API_KEY", "test-tmdb")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "Testing")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from core.database import create_engine, create_session_factory  # noqa: E402
from models import Base  # noqa: E402


class TickingClock:
    """Returns a strictly later UTC time on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'movieapp-test.db'}"


@pytest.fixture
async def engine(db_url):
    engine = create_engine(db_url, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    async with create_session_factory(engine)() as session:
        yield session
