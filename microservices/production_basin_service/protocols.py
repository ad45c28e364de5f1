"""
Production Basin Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, Iterable, List, Optional, Protocol, Set, runtime_checkable

from core.errors import PlatformError


class ProductionBasinServiceError(PlatformError):
    """Base exception for production basin service errors"""

    code = "PRODUCTION_BASIN_ERROR"


class ProductionBasinNotFoundError(ProductionBasinServiceError):
    """Production basin does not exist"""

    code = "PRODUCTION_BASIN_NOT_FOUND"
    status = 404


class AssignmentNotAuthorizedError(ProductionBasinServiceError):
    """Caller's role may not assign users to the basin"""

    code = "PRODUCTION_BASIN_ASSIGN_USERS_NOT_AUTHORIZED"
    status = 403


class UnassignmentNotAuthorizedError(ProductionBasinServiceError):
    """Caller's role may not remove users from the basin"""

    code = "PRODUCTION_BASIN_UNASSIGN_USERS_NOT_AUTHORIZED"
    status = 403


class AssignUsersFailedError(ProductionBasinServiceError):
    """Assignment could not be completed (storage failure)"""

    code = "PRODUCTION_BASIN_ASSIGN_USERS_FAILED"
    status = 500


class UnassignUsersFailedError(ProductionBasinServiceError):
    code = "PRODUCTION_BASIN_UNASSIGN_USERS_FAILED"
    status = 500


@runtime_checkable
class UserLookupProtocol(Protocol):
    """Existence lookup for user identifiers"""

    async def find_existing_ids(self, ids: Iterable[int]) -> Set[int]:
        """Return the subset of ``ids`` that have a user record (one round trip)"""
        ...


@runtime_checkable
class ProductionBasinRepositoryProtocol(Protocol):
    """
    Interface for Production Basin Repository.

    Used for dependency injection to enable testing.
    """

    async def get_basin(self, basin_id: str) -> Optional[Dict[str, Any]]:
        """Get basin by ID, None when it does not exist"""
        ...

    async def assign_users(self, basin_id: str, user_ids: List[int]) -> int:
        """Point the users at the basin, returns rows updated"""
        ...

    async def unassign_users(self, basin_id: str, user_ids: List[int]) -> int:
        """Detach the users currently in the basin, returns rows updated"""
        ...

    async def list_basin_users(self, basin_id: str) -> List[Dict[str, Any]]:
        """Users currently assigned to the basin"""
        ...

    async def health_check(self) -> bool:
        ...


__all__ = [
    "ProductionBasinServiceError",
    "ProductionBasinNotFoundError",
    "AssignmentNotAuthorizedError",
    "UnassignmentNotAuthorizedError",
    "AssignUsersFailedError",
    "UnassignUsersFailedError",
    "UserLookupProtocol",
    "ProductionBasinRepositoryProtocol",
]
