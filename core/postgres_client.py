"""
PostgreSQL Client Wrapper for the ONCC platform

Thin wrapper around an asyncpg connection pool. Repositories take a
``PostgresClient`` and never touch asyncpg directly.

Usage:
    from core.postgres_client import PostgresClient

    db = PostgresClient.from_config("production_basin_service", settings.infrastructure)
    async with db:
        rows = await db.query("SELECT id FROM users WHERE id = ANY($1)", [ids])
"""

import logging
from typing import Any, Dict, List, Optional

import asyncpg

from core.config.infra_config import InfraConfig

logger = logging.getLogger(__name__)


class PostgresClient:
    """
    asyncpg pool wrapper.

    Rows come back as plain dicts so callers stay independent of asyncpg
    record types.
    """

    def __init__(
        self,
        service_name: str,
        dsn: str,
        min_size: int = 1,
        max_size: int = 10,
    ):
        self.service_name = service_name
        self.dsn = dsn
        self.min_size = min_size
        self.max_size = max_size
        self._pool: Optional[asyncpg.Pool] = None

    @classmethod
    def from_config(cls, service_name: str, config: InfraConfig) -> "PostgresClient":
        return cls(
            service_name=service_name,
            dsn=config.postgres_dsn,
            min_size=config.postgres_pool_min,
            max_size=config.postgres_pool_max,
        )

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("PostgreSQL pool is not connected")
        return self._pool

    async def connect(self):
        if self._pool is None:
            self._pool = await asyncpg.create_pool(
                dsn=self.dsn, min_size=self.min_size, max_size=self.max_size
            )
            logger.info(f"PostgreSQL pool ready for {self.service_name}")

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def acquire(self):
        """Acquire a raw connection (``async with db.acquire() as conn``)"""
        return self.pool.acquire()

    async def health_check(self) -> Dict[str, Any]:
        try:
            value = await self.pool.fetchval("SELECT 1")
            return {"healthy": value == 1}
        except Exception as e:
            logger.error(f"PostgreSQL health check failed: {e}")
            return {"healthy": False, "error": str(e)}

    async def query(self, sql: str, params: Optional[List[Any]] = None) -> List[Dict[str, Any]]:
        """Execute query and return results"""
        rows = await self.pool.fetch(sql, *(params or []))
        return [dict(row) for row in rows]

    async def query_row(self, sql: str, params: Optional[List[Any]] = None) -> Optional[Dict[str, Any]]:
        """Execute query and return single row"""
        row = await self.pool.fetchrow(sql, *(params or []))
        return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Optional[List[Any]] = None) -> str:
        """Execute SQL statement, returns the command status (e.g. ``UPDATE 3``)"""
        return await self.pool.execute(sql, *(params or []))

    async def close(self):
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info(f"PostgreSQL pool closed for {self.service_name}")


def affected_rows(status: str) -> int:
    """Row count from an asyncpg command status string"""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, AttributeError):
        return 0
