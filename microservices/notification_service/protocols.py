"""
Notification Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import List, Protocol, Sequence, runtime_checkable

from core.errors import PlatformError

from .models import EmailMessage, Recipient


class NotificationServiceError(PlatformError):
    """Base exception for notification service errors"""

    code = "NOTIFICATION_ERROR"


class EmailDeliveryError(NotificationServiceError):
    """E-mail provider rejected or failed the send"""

    code = "NOTIFICATION_EMAIL_DELIVERY_FAILED"
    status = 502


@runtime_checkable
class RecipientDirectoryProtocol(Protocol):
    """Resolves who should receive a notification"""

    async def actor_managers(self, actor_id: str) -> List[Recipient]:
        """Active actor_manager users of an actor"""
        ...

    async def active_actor_users(self, actor_id: str) -> List[Recipient]:
        """Every active user of an actor, whatever their role"""
        ...

    async def store_occupant_managers(self, store_id: str) -> List[Recipient]:
        """Actor managers of every occupant of a store (actor_name = occupant)"""
        ...

    async def users_with_roles(self, roles: Sequence[str]) -> List[Recipient]:
        """Active users holding any of the roles"""
        ...


@runtime_checkable
class EmailClientProtocol(Protocol):
    """Sends one e-mail"""

    async def send(self, message: EmailMessage) -> str:
        """Send and return the provider message id; raise EmailDeliveryError on failure"""
        ...


__all__ = [
    "NotificationServiceError",
    "EmailDeliveryError",
    "RecipientDirectoryProtocol",
    "EmailClientProtocol",
]
