"""
Postgres connection pool for the feedback store.

One Database is built per process (by the app factory or a CLI command),
passed explicitly to the repository, and closed on shutdown. Queries go
straight through the asyncpg pool, which checks a connection out for the
duration of each call.
"""

import logging
from types import TracebackType
from typing import Any

import asyncpg

from feedback_hub.config.settings import get_settings

logger = logging.getLogger(__name__)


class Database:
    """
    Pool-backed query helpers over asyncpg.

    Usage:
        async with Database() as db:
            rows = await db.fetch("SELECT * FROM feedback")
    """

    def __init__(
        self,
        dsn: str | None = None,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float = 30.0,
    ):
        settings = get_settings()
        self.dsn = dsn or settings.database_dsn
        self.min_size = min_size or settings.db_pool_min_size
        self.max_size = max_size or settings.db_pool_max_size
        self.command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        """Open the pool. Calling it again while open does nothing."""
        if self._pool is not None:
            return
        try:
            self._pool = await asyncpg.create_pool(
                self.dsn,
                min_size=self.min_size,
                max_size=self.max_size,
                command_timeout=self.command_timeout,
            )
        except Exception as e:
            logger.error(f"Could not open feedback database pool: {e}")
            raise
        logger.info(f"Feedback database pool open ({self.min_size}-{self.max_size} connections)")

    async def close(self) -> None:
        if self._pool is None:
            return
        pool, self._pool = self._pool, None
        await pool.close()
        logger.info("Feedback database pool closed")

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("Database not connected")
        return self._pool

    async def execute(self, query: str, *args: Any) -> str:
        """Run a statement; returns the Postgres status tag (e.g. ``INSERT 0 1``)."""
        return await self._require_pool().execute(query, *args)

    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        return await self._require_pool().fetch(query, *args)

    async def fetchrow(self, query: str, *args: Any) -> asyncpg.Record | None:
        return await self._require_pool().fetchrow(query, *args)

    async def fetchval(self, query: str, *args: Any) -> Any:
        return await self._require_pool().fetchval(query, *args)

    async def health_check(self) -> bool:
        """True if the pool is open and answers ``SELECT 1``."""
        try:
            return await self.fetchval("SELECT 1") == 1
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False
