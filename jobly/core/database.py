"""
Relational store access.

Repositories talk to PostgreSQL through hand-written SQL with positional
``$N`` placeholders. ``Database`` wraps an SQLAlchemy async engine (asyncpg
driver) and hands the statement text straight to the driver, so the
placeholders bind by position exactly as written.

One ``Database`` is created per process and injected into repositories via
``get_db``; tests override that dependency with their own instance.
"""
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from jobly.core.config import settings
from jobly.core.logging import get_logger

logger = get_logger(__name__)

Record = Dict[str, Any]


class Database:
    """Executes parameterized statements and returns rows as plain dicts."""

    def __init__(self, url: str, **engine_kwargs: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)

    async def fetch(self, sql: str, values: Sequence[Any] = ()) -> List[Record]:
        """
        Run one statement in its own transaction.

        Returns every row as a column -> value dict, or an empty list for
        statements that return nothing.
        """
        async with self.engine.begin() as conn:
            result = await conn.exec_driver_sql(sql, tuple(values))
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, sql: str, values: Sequence[Any] = ()) -> Optional[Record]:
        """Run a statement and return its first row, if any."""
        rows = await self.fetch(sql, values)
        return rows[0] if rows else None

    async def ping(self) -> None:
        await self.fetch("SELECT 1")

    async def dispose(self) -> None:
        await self.engine.dispose()


database = Database(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
)


def get_db() -> Database:
    """FastAPI dependency returning the process-wide store handle."""
    return database


async def init_db() -> None:
    """Verify the store is reachable. Called once at startup."""
    await database.ping()
    logger.info("database_reachable", url=database.engine.url.render_as_string(hide_password=True))


async def close_db() -> None:
    """Release pooled connections. Called once at shutdown."""
    await database.dispose()
