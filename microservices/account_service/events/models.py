"""
Account Event Data Models

Payloads for user account lifecycle notifications. Each one carries the
recipient's own e-mail address.
"""

from typing import Literal, Optional

from pydantic import EmailStr

from core.events import DomainEvent, EventPayload, EventType, ServiceSource


class ActorInfo(EventPayload):
    """Actor the new manager is attached to"""
    name: str
    type: str
    location: Optional[str] = None


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class AccountActivatedPayload(EventPayload):
    """user.account-activated event data"""
    email: EmailStr
    user_name: str


class AccountDeactivatedPayload(EventPayload):
    """user.account-deactivated event data"""
    email: EmailStr
    user_name: str
    reason: Optional[str] = None


class ActorManagerWelcomePayload(EventPayload):
    """user.actor-manager-welcome event data"""
    email: EmailStr
    user_name: str
    username: str
    temp_password: str
    actor_info: ActorInfo


# =============================================================================
# Envelope variants
# =============================================================================


class AccountEvent(DomainEvent):
    source: str = ServiceSource.ACCOUNT_SERVICE.value


class AccountActivatedEvent(AccountEvent):
    type: Literal["user.account-activated"] = EventType.ACCOUNT_ACTIVATED.value
    data: AccountActivatedPayload


class AccountDeactivatedEvent(AccountEvent):
    type: Literal["user.account-deactivated"] = EventType.ACCOUNT_DEACTIVATED.value
    data: AccountDeactivatedPayload


class ActorManagerWelcomeEvent(AccountEvent):
    type: Literal["user.actor-manager-welcome"] = EventType.ACTOR_MANAGER_WELCOME.value
    data: ActorManagerWelcomePayload


ACCOUNT_EVENTS = (
    AccountActivatedEvent,
    AccountDeactivatedEvent,
    ActorManagerWelcomeEvent,
)
