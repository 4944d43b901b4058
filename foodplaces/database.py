"""
Food Places API: Database Engine and Sessions
=============================================

What:  Async SQLAlchemy engine factory, session factory, and a transactional
       session scope used by the SQL store.
How:   `create_engine()` builds an engine from settings (pool options only for
       server databases), `build_session_factory()` wraps it, and
       `session_scope()` commits on success and rolls back on error.
Who:   Used by `SqlFoodPlaceStore` and by the tests (in-memory SQLite).

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from settings.
    pool_recycle=3600 recycles connections every hour.
    SQLite (aiosqlite) URLs get none of these; SQLAlchemy picks its own pool.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from foodplaces.config import Settings, settings as default_settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


def create_engine(
    app_settings: Optional[Settings] = None,
    url: Optional[str] = None,
    **engine_kwargs,
) -> AsyncEngine:
    """
    Build the async engine for the SQL store.

    Args:
        app_settings: Settings to read the URL and pool sizing from
                      (defaults to the module singleton).
        url:          Overrides `app_settings.database_url`.
        engine_kwargs: Passed straight to `create_async_engine`.
    """
    cfg = app_settings or default_settings
    database_url = url or cfg.database_url

    options = {"echo": cfg.log_level == "DEBUG"}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=cfg.db_pool_size,
            max_overflow=cfg.db_max_overflow,
            pool_pre_ping=cfg.db_pool_pre_ping,
            pool_recycle=3600,
        )
    options.update(engine_kwargs)
    return create_async_engine(database_url, **options)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps attribute access working after commit,
    which the store relies on when converting rows to records.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """
    One session, one transaction.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the caller
        3. On success: commits the transaction
        4. On error: rolls back and re-raises
        5. Always: closes the session (returns connection to pool)
    """
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table registered on `Base.metadata` that does not exist yet."""
    # Registers FoodPlace on Base.metadata
    from foodplaces.models import food_place  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections. Called from the store's close()."""
    await engine.dispose()
