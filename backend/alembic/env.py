"""
Alembic Migration Environment
===============================

What:  Runs the VideoGames migrations (001 table, 002 seed rows) against the
       database named by DATABASE_URL.
How:   The URL comes from app settings, never alembic.ini, so `alembic
       upgrade head` and the running API always agree on the database.
       Online runs go through an async engine bridged with run_sync().
Who:   `alembic upgrade head` / `alembic downgrade base`. DB_BOOTSTRAP=true
       is the migration-free alternative for local SQLite work.

SQLite:
    ALTER TABLE support is limited, so batch mode (copy-and-move) is turned
    on whenever the target is SQLite, online or offline.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import async_engine_from_config
from alembic import context

from app.config import settings
from app.database import Base

# Registers the VideoGames table on Base.metadata for --autogenerate
from app.models.video_game import VideoGame  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)


def _configure(**options) -> None:
    context.configure(
        target_metadata=Base.metadata,
        render_as_batch=settings.is_sqlite,
        compare_type=True,
        **options,
    )


def run_migrations_offline() -> None:
    """Print the migration SQL (including the seed INSERTs) without connecting."""
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_on_connection(connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    # NullPool: a migration run holds exactly one connection, then exits
    migration_engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with migration_engine.connect() as connection:
            await connection.run_sync(_run_on_connection)
    finally:
        await migration_engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
