"""
VideoGame API - Database Session Management
=============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine from settings and provides a per-request
       session that commits on success and rolls back on error.
Who:   Route handlers (via Depends), the health check, and the app lifespan.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling:
    PostgreSQL:  pool_size / max_overflow / pool_pre_ping from settings,
                 connections recycled hourly.
    SQLite:      SQLAlchemy's default pool for the file; sizing arguments
                 are not accepted there and are left out. Every connection
                 gets a Unicode-aware lower() so case-insensitive filters
                 fold "ÉLITE" the same way Python's str.lower() does.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options() -> Dict[str, Any]:
    """Build create_async_engine keyword arguments for the configured backend."""
    options: Dict[str, Any] = {
        # SQL echo only when debugging; it is very noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


def _unicode_lower(value: Optional[str]) -> Optional[str]:
    # SQLite's built-in lower() only folds ASCII
    return value.lower() if isinstance(value, str) else value


def install_sqlite_functions(async_engine: AsyncEngine) -> None:
    """Replace lower() on every new SQLite connection of `async_engine`."""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _register_functions(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options())
if settings.is_sqlite:
    install_sqlite_functions(engine)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned rows stay readable after the commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register their tables on `Base.metadata`, which Alembic reads for
    autogenerate and the startup bootstrap uses for create_all.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits whatever the handler left pending
        4. On error: rolls back and re-raises for the global error handlers
        5. Always: closes the session (returns the connection to the pool)

    Example usage in a route:
        @router.get("/api/videogame")
        async def list_video_games(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema() -> None:
    """
    What:  Creates every table registered on Base.metadata if missing.
    When:  Startup, only with DB_BOOTSTRAP enabled. Alembic owns the schema otherwise.
    """
    # Registers the VideoGame table on the metadata
    from app.models.video_game import VideoGame  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
