"""Forum Database — async engine, per-request sessions, readiness ping.

Invariants:
    - One engine per process, created by init_db() from the lifespan
    - A request session that sees an exception is rolled back before it closes
    - Sessions never expire loaded rows on commit: handlers read them after committing

Design Decisions:
    - Exceptions are re-raised untouched; mapping to DatabaseError belongs to the
      handler boundary (services/error_handling.py), which knows the operation name
    - Pool arguments only for server databases; SQLite files use SQLAlchemy's defaults
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

logger = logging.getLogger(__name__)


class ForumDatabase:
    """Owns the engine and hands out request-scoped AsyncSessions."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessions = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ) -> "ForumDatabase":
        engine_args = {"pool_pre_ping": True}
        if make_url(database_url).get_backend_name() != "sqlite":
            engine_args.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        return cls(create_async_engine(database_url, **engine_args))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.sessions() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database ping failed: {e}", extra={"operation": "ping"})
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: ForumDatabase | None = None


def init_db(database_url: str, **pool_args) -> ForumDatabase:
    global db_manager
    db_manager = ForumDatabase.from_url(database_url, **pool_args)
    logger.info(
        f"Database engine ready ({make_url(database_url).get_backend_name()})",
    )
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
