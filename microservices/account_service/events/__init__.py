"""
Account Service Events Module
"""

from .models import (
    ACCOUNT_EVENTS,
    AccountActivatedEvent,
    AccountActivatedPayload,
    AccountDeactivatedEvent,
    AccountDeactivatedPayload,
    ActorInfo,
    ActorManagerWelcomeEvent,
    ActorManagerWelcomePayload,
)
from .publishers import AccountEventPublisher

__all__ = [
    "ACCOUNT_EVENTS",
    "AccountEventPublisher",
    "AccountActivatedEvent",
    "AccountActivatedPayload",
    "AccountDeactivatedEvent",
    "AccountDeactivatedPayload",
    "ActorInfo",
    "ActorManagerWelcomeEvent",
    "ActorManagerWelcomePayload",
]
