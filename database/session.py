"""
Async SQLAlchemy engine and session factory.

The engine (and its connection pool) is created once at application
startup and disposed at shutdown; each request borrows one session.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from config.settings import config
from database.models import Base

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def init_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the process-wide engine; calling it twice is a no-op."""
    global engine, async_session_factory

    if engine is not None:
        return engine

    engine = create_async_engine(
        database_url or config.database_url,
        echo=False,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_recycle=config.db_pool_recycle,
        pool_pre_ping=True,
    )
    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database engine initialised (pool_size=%d)", config.db_pool_size)
    return engine


async def create_tables() -> None:
    """Create missing tables from the ORM metadata."""
    if engine is None:
        raise RuntimeError("Database engine is not initialised")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global engine, async_session_factory

    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    async_session_factory = None


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    if async_session_factory is None:
        raise RuntimeError("Database engine is not initialised")
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
