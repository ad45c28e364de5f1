"""
Production Basin Repository

asyncpg-backed data access for basin membership and user existence.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set

import asyncpg

from core.postgres_client import PostgresClient, affected_rows

logger = logging.getLogger(__name__)

# users.id is an int4 column; ids outside it cannot match a record
USER_ID_MIN = -(2 ** 31)
USER_ID_MAX = 2 ** 31 - 1


class PostgresUserLookup:
    """User existence lookup, one query per batch"""

    def __init__(self, db: PostgresClient):
        self.db = db

    async def find_existing_ids(self, ids: Iterable[int]) -> Set[int]:
        ids = [i for i in ids if USER_ID_MIN <= i <= USER_ID_MAX]
        if not ids:
            return set()
        rows = await self.db.query("SELECT id FROM users WHERE id = ANY($1::int[])", [ids])
        return {row["id"] for row in rows}


class ProductionBasinRepository:
    """Basin lookup and user assignment"""

    def __init__(self, db: PostgresClient):
        self.db = db

    async def get_basin(self, basin_id: str) -> Optional[Dict[str, Any]]:
        try:
            return await self.db.query_row(
                "SELECT id::text AS id, name FROM production_basins WHERE id = $1", [basin_id]
            )
        except asyncpg.DataError:
            # Malformed identifier for the column type
            return None

    async def assign_users(self, basin_id: str, user_ids: List[int]) -> int:
        status = await self.db.execute(
            "UPDATE users SET production_basin_id = $1, updated_at = now() WHERE id = ANY($2::int[])",
            [basin_id, user_ids],
        )
        count = affected_rows(status)
        logger.info(f"Assigned {count} user(s) to basin {basin_id}")
        return count

    async def unassign_users(self, basin_id: str, user_ids: List[int]) -> int:
        status = await self.db.execute(
            "UPDATE users SET production_basin_id = NULL, updated_at = now() "
            "WHERE id = ANY($2::int[]) AND production_basin_id = $1",
            [basin_id, user_ids],
        )
        count = affected_rows(status)
        logger.info(f"Unassigned {count} user(s) from basin {basin_id}")
        return count

    async def list_basin_users(self, basin_id: str) -> List[Dict[str, Any]]:
        return await self.db.query(
            "SELECT id, username, email, given_name, family_name, role "
            "FROM users WHERE production_basin_id = $1 ORDER BY id",
            [basin_id],
        )

    async def health_check(self) -> bool:
        result = await self.db.health_check()
        return bool(result.get("healthy"))
