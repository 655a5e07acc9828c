"""Async SQLAlchemy engine and session factory for the embedded SQLite database."""
import logging
from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import get_settings
from models import Base


logger = logging.getLogger(__name__)


def _set_sqlite_pragmas(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
    """Enable write-ahead logging and foreign key enforcement on every connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: str) -> AsyncEngine:
    """Create an async engine with the SQLite pragmas installed."""
    engine = create_async_engine(database_url, echo=False)
    event.listen(engine.sync_engine, "connect", _set_sqlite_pragmas)
    return engine


async def init_db(engine: AsyncEngine) -> None:
    """Create all tables and indexes if they do not already exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("database_initialized", extra={"url": str(engine.url)})


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the process-wide engine, creating it on first use."""
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return create_database_engine(settings.database_url)


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory bound to the process-wide engine."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session; the whole request is one transaction."""
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
