"""
VideoGame API - Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:     AsyncMock session for service unit tests (no DB)
    ├── db_session_factory:  Per-test SQLite file with schema + seed records
    ├── db_session:          One session from that factory
    └── test_client:         HTTPX AsyncClient against the app, DB overridden
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run BEFORE any app import: settings and the engine are built at import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="videogame_api_test_"), "unused.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_BOOTSTRAP"] = "false"

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from app.database import Base, get_db_session, install_sqlite_functions  # noqa: E402
from app.models.video_game import VideoGame  # noqa: E402,F401
from app.seed import seed_video_games  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Unit-test fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.scalar_one_or_none.return_value = game
            result = await video_game_service.get_video_game(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Database fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_session_factory(tmp_path):
    """
    Provides a session factory bound to a fresh, seeded SQLite database.

    Each test gets its own file, so ids always start at 1 (seeds are 1-3).
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'videogames.db'}")
    install_sqlite_functions(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await seed_video_games(session)
        await session.commit()

    yield factory

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_session_factory):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   ASGITransport routes requests straight into the app; the
           get_db_session dependency is swapped for one bound to the
           per-test database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/videogame")
            assert response.status_code == 200
    """
    from app.main import app

    async def override_get_db_session():
        async with db_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
