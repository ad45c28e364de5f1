"""
Service Dependency Mocks

In-memory implementations of the repository, lookup, recipient directory
and e-mail client protocols.
"""
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from microservices.notification_service.models import EmailMessage, Recipient
from microservices.notification_service.protocols import EmailDeliveryError


class MockUserLookup:
    """Mock for UserLookupProtocol"""

    def __init__(self, existing_ids: Iterable[int] = ()):
        self.existing_ids: Set[int] = set(existing_ids)
        self.calls: List[List[int]] = []

    async def find_existing_ids(self, ids: Iterable[int]) -> Set[int]:
        ids = list(ids)
        self.calls.append(ids)
        return {i for i in ids if i in self.existing_ids}


class MockProductionBasinRepository:
    """Mock for ProductionBasinRepositoryProtocol backed by dicts"""

    def __init__(self):
        self.basins: Dict[str, Dict[str, Any]] = {}
        self.users: Dict[int, Dict[str, Any]] = {}
        self.calls: List[tuple] = []
        self.healthy = True
        self._error: Optional[Exception] = None

    # Test helper methods

    def add_basin(self, basin_id: str, name: str):
        self.basins[basin_id] = {"id": basin_id, "name": name}

    def add_user(self, user_id: int, username: str, basin_id: Optional[str] = None):
        self.users[user_id] = {
            "id": user_id,
            "username": username,
            "email": f"{username}@oncc.ci",
            "given_name": username.capitalize(),
            "family_name": "Test",
            "role": "basin_admin",
            "production_basin_id": basin_id,
        }

    def basin_of(self, user_id: int) -> Optional[str]:
        return self.users[user_id]["production_basin_id"]

    def set_error(self, error: Exception):
        """Make the next writes raise"""
        self._error = error

    # Protocol

    async def get_basin(self, basin_id: str) -> Optional[Dict[str, Any]]:
        self.calls.append(("get_basin", basin_id))
        return self.basins.get(basin_id)

    async def assign_users(self, basin_id: str, user_ids: List[int]) -> int:
        self.calls.append(("assign_users", basin_id, list(user_ids)))
        if self._error:
            raise self._error
        updated = 0
        for user_id in set(user_ids):
            if user_id in self.users:
                self.users[user_id]["production_basin_id"] = basin_id
                updated += 1
        return updated

    async def unassign_users(self, basin_id: str, user_ids: List[int]) -> int:
        self.calls.append(("unassign_users", basin_id, list(user_ids)))
        if self._error:
            raise self._error
        updated = 0
        for user_id in set(user_ids):
            user = self.users.get(user_id)
            if user and user["production_basin_id"] == basin_id:
                user["production_basin_id"] = None
                updated += 1
        return updated

    async def list_basin_users(self, basin_id: str) -> List[Dict[str, Any]]:
        return [
            {k: v for k, v in user.items() if k != "production_basin_id"}
            for user_id, user in sorted(self.users.items())
            if user["production_basin_id"] == basin_id
        ]

    async def health_check(self) -> bool:
        return self.healthy

    def mutations(self) -> List[tuple]:
        return [c for c in self.calls if c[0] in ("assign_users", "unassign_users")]


class MockRecipientDirectory:
    """Mock for RecipientDirectoryProtocol"""

    def __init__(self):
        self.managers: Dict[str, List[Recipient]] = {}
        self.occupant_managers: Dict[str, List[Recipient]] = {}
        self.by_role: Dict[str, List[Recipient]] = {}
        self.actor_users: Dict[str, List[Recipient]] = {}
        self.calls: List[tuple] = []
        self._should_raise: Optional[Exception] = None

    def set_error(self, error: Exception):
        self._should_raise = error

    async def actor_managers(self, actor_id: str) -> List[Recipient]:
        self.calls.append(("actor_managers", actor_id))
        if self._should_raise:
            raise self._should_raise
        return list(self.managers.get(actor_id, []))

    async def active_actor_users(self, actor_id: str) -> List[Recipient]:
        self.calls.append(("active_actor_users", actor_id))
        if self._should_raise:
            raise self._should_raise
        return list(self.actor_users.get(actor_id, []))

    async def store_occupant_managers(self, store_id: str) -> List[Recipient]:
        self.calls.append(("store_occupant_managers", store_id))
        if self._should_raise:
            raise self._should_raise
        return list(self.occupant_managers.get(store_id, []))

    async def users_with_roles(self, roles: Sequence[str]) -> List[Recipient]:
        self.calls.append(("users_with_roles", tuple(roles)))
        if self._should_raise:
            raise self._should_raise
        found: List[Recipient] = []
        for role in roles:
            for recipient in self.by_role.get(role, []):
                if recipient not in found:
                    found.append(recipient)
        return found


class MockEmailClient:
    """Mock for EmailClientProtocol; addresses in ``failing`` raise EmailDeliveryError"""

    def __init__(self):
        self.sent: List[EmailMessage] = []
        self.failing: Set[str] = set()

    async def send(self, message: EmailMessage) -> str:
        if message.to in self.failing:
            raise EmailDeliveryError(f"Email API error: 500 - cannot deliver to {message.to}")
        self.sent.append(message)
        return f"msg-{len(self.sent)}"

    async def close(self):
        pass

    def sent_to(self, email: str) -> List[EmailMessage]:
        return [m for m in self.sent if m.to == email]
