"""Database Session Manager — the process-wide store connection and per-request sessions.

Invariants:
    - One async engine per process, limited to a single live connection
    - Sessions are always closed (connection returned) when the request ends;
      rollback on failure belongs to services/store.py
    - STORE_ERRORS is the one definition of "the store failed": driver errors plus
      raw socket errors and timeouts that SQLAlchemy does not wrap
    - A failed startup connection is logged, never fatal (handlers fail one by one)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - Handlers receive sessions through get_db, so tests swap the store via dependency_overrides
    - expire_on_commit=False: rows stay readable after commit in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

logger = logging.getLogger(__name__)

STORE_ERRORS = (SQLAlchemyError, OSError, TimeoutError)


class DatabaseSessionManager:
    """Owns the store engine and hands out sessions bound to its one connection."""

    def __init__(self, database_url: str, **engine_kwargs):
        if "poolclass" not in engine_kwargs:
            engine_kwargs.setdefault("pool_size", 1)
            engine_kwargs.setdefault("max_overflow", 0)
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session, closed when the caller is done."""
        session = self._session_factory()
        try:
            yield session
        finally:
            await session.close()

    async def connect(self) -> bool:
        """Open the store connection once; log and carry on if it fails."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except STORE_ERRORS as e:
            logger.error(f"Database connection error: {e}")
            return False
        logger.info("Database connected")
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
