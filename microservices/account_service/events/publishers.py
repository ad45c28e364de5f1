"""
Account Service Event Publishers

Publish events for account lifecycle and actor manager onboarding.
"""

import logging
from typing import Optional

from core.event_bus import EventPublisherBase

from .models import (
    AccountActivatedEvent,
    AccountActivatedPayload,
    AccountDeactivatedEvent,
    AccountDeactivatedPayload,
    ActorInfo,
    ActorManagerWelcomeEvent,
    ActorManagerWelcomePayload,
)

logger = logging.getLogger(__name__)


class AccountEventPublisher(EventPublisherBase):
    """Publisher for user account events"""

    async def publish_account_activated(self, email: str, user_name: str) -> bool:
        """Publish user.account-activated event"""
        data = AccountActivatedPayload(email=email, user_name=user_name)
        return await self.publish(AccountActivatedEvent(data=data))

    async def publish_account_deactivated(
        self, email: str, user_name: str, reason: Optional[str] = None
    ) -> bool:
        """
        Publish user.account-deactivated event

        Args:
            email: Address of the deactivated account
            user_name: Display name of the account holder
            reason: Why the account was deactivated, None when not given
        """
        data = AccountDeactivatedPayload(email=email, user_name=user_name, reason=reason)
        return await self.publish(AccountDeactivatedEvent(data=data))

    async def publish_actor_manager_welcome(
        self,
        email: str,
        user_name: str,
        username: str,
        temp_password: str,
        actor_name: str,
        actor_type: str,
        actor_location: Optional[str] = None,
    ) -> bool:
        """Publish user.actor-manager-welcome event"""
        data = ActorManagerWelcomePayload(
            email=email,
            user_name=user_name,
            username=username,
            temp_password=temp_password,
            actor_info=ActorInfo(name=actor_name, type=actor_type, location=actor_location),
        )
        return await self.publish(ActorManagerWelcomeEvent(data=data))
