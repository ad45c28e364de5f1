"""
Production Basin Service - Business logic

Assignment and unassignment of users. The body is validated before the
basin is looked up and before anything is written. Storage failures are
reported as the operation's FAILED error; platform errors pass through.
"""

import logging
from typing import Any

from core.errors import PlatformError

from .models import BasinUser, ProductionBasin
from .protocols import (
    AssignUsersFailedError,
    ProductionBasinNotFoundError,
    ProductionBasinRepositoryProtocol,
    UnassignUsersFailedError,
    UserLookupProtocol,
)
from .validators import validate_assign_users_or_raise

logger = logging.getLogger(__name__)


class ProductionBasinService:
    def __init__(
        self,
        repository: ProductionBasinRepositoryProtocol,
        user_lookup: UserLookupProtocol,
    ):
        self.repository = repository
        self.user_lookup = user_lookup

    async def _get_basin_or_raise(self, basin_id: str) -> dict:
        basin = await self.repository.get_basin(basin_id)
        if not basin:
            raise ProductionBasinNotFoundError("Bassin de production introuvable")
        return basin

    async def _load(self, basin: dict) -> ProductionBasin:
        users = await self.repository.list_basin_users(basin["id"])
        return ProductionBasin(
            id=str(basin["id"]),
            name=basin["name"],
            users=[BasinUser(**user) for user in users],
        )

    async def assign_users(self, basin_id: str, candidate: Any) -> ProductionBasin:
        """Assign every listed user to the basin (moving them from any other basin)"""
        try:
            request = await validate_assign_users_or_raise(candidate, self.user_lookup)
            basin = await self._get_basin_or_raise(basin_id)

            if request.user_ids:
                await self.repository.assign_users(basin["id"], request.user_ids)
            return await self._load(basin)
        except PlatformError:
            raise
        except Exception as e:
            logger.error(f"Error assigning users to basin {basin_id}: {e}", exc_info=True)
            raise AssignUsersFailedError("Erreur lors de l'assignation des utilisateurs") from e

    async def unassign_users(self, basin_id: str, candidate: Any) -> ProductionBasin:
        """Detach the listed users that currently belong to this basin; others are left alone"""
        try:
            request = await validate_assign_users_or_raise(candidate, self.user_lookup)
            basin = await self._get_basin_or_raise(basin_id)

            if request.user_ids:
                await self.repository.unassign_users(basin["id"], request.user_ids)
            return await self._load(basin)
        except PlatformError:
            raise
        except Exception as e:
            logger.error(f"Error unassigning users from basin {basin_id}: {e}", exc_info=True)
            raise UnassignUsersFailedError("Erreur lors de la désassignation des utilisateurs") from e
