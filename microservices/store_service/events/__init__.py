"""
Store Service Events Module
"""

from .models import (
    STORE_EVENTS,
    OccupantAssignedEvent,
    OccupantAssignedPayload,
    OccupantRef,
    OccupantUnassignedEvent,
    OccupantUnassignedPayload,
    StoreActivatedEvent,
    StoreActivatedPayload,
    StoreDeactivatedEvent,
    StoreDeactivatedPayload,
    StoreDetails,
    StoreRef,
)
from .publishers import StoreEventPublisher

__all__ = [
    "STORE_EVENTS",
    "StoreEventPublisher",
    "OccupantAssignedEvent",
    "OccupantAssignedPayload",
    "OccupantRef",
    "OccupantUnassignedEvent",
    "OccupantUnassignedPayload",
    "StoreActivatedEvent",
    "StoreActivatedPayload",
    "StoreDeactivatedEvent",
    "StoreDeactivatedPayload",
    "StoreDetails",
    "StoreRef",
]
