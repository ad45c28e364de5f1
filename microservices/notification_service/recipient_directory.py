"""
Recipient directory backed by PostgreSQL
"""

import logging
from typing import Any, Dict, List, Sequence

from core.postgres_client import PostgresClient

from .models import Recipient

logger = logging.getLogger(__name__)

ACTOR_MANAGER_ROLE = "actor_manager"
ACTIVE_STATUS = "active"


def _full_name(given_name: Any, family_name: Any) -> str:
    return f"{given_name or ''} {family_name or ''}".strip()


def _recipient(row: Dict[str, Any]) -> Recipient:
    actor_name = None
    if "actor_given_name" in row:
        actor_name = _full_name(row["actor_given_name"], row["actor_family_name"]) or None
    return Recipient(
        email=row["email"],
        name=_full_name(row.get("given_name"), row.get("family_name")),
        actor_id=row.get("actor_id"),
        actor_name=actor_name,
    )


class PostgresRecipientDirectory:
    def __init__(self, db: PostgresClient):
        self.db = db

    async def actor_managers(self, actor_id: str) -> List[Recipient]:
        rows = await self.db.query(
            "SELECT email, given_name, family_name, actor_id::text AS actor_id "
            "FROM users "
            "WHERE actor_id::text = $1 AND role = $2 AND deleted_at IS NULL AND email IS NOT NULL",
            [actor_id, ACTOR_MANAGER_ROLE],
        )
        return [_recipient(row) for row in rows]

    async def active_actor_users(self, actor_id: str) -> List[Recipient]:
        rows = await self.db.query(
            "SELECT email, given_name, family_name, actor_id::text AS actor_id "
            "FROM users "
            "WHERE actor_id::text = $1 AND status = $2 AND deleted_at IS NULL AND email IS NOT NULL",
            [actor_id, ACTIVE_STATUS],
        )
        return [_recipient(row) for row in rows]

    async def store_occupant_managers(self, store_id: str) -> List[Recipient]:
        rows = await self.db.query(
            "SELECT u.email, u.given_name, u.family_name, a.id::text AS actor_id, "
            "       a.given_name AS actor_given_name, a.family_name AS actor_family_name "
            "FROM store_occupants so "
            "JOIN actors a ON a.id = so.actor_id "
            "JOIN users u ON u.actor_id = a.id "
            "WHERE so.store_id::text = $1 AND u.role = $2 "
            "  AND u.deleted_at IS NULL AND u.email IS NOT NULL",
            [store_id, ACTOR_MANAGER_ROLE],
        )
        return [_recipient(row) for row in rows]

    async def users_with_roles(self, roles: Sequence[str]) -> List[Recipient]:
        rows = await self.db.query(
            "SELECT email, given_name, family_name "
            "FROM users "
            "WHERE role = ANY($1::text[]) AND deleted_at IS NULL AND email IS NOT NULL",
            [list(roles)],
        )
        return [_recipient(row) for row in rows]
