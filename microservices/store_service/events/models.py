"""
Store Event Data Models

Store lifecycle (activation per campaign) and occupancy events.
"""

from typing import Literal, Optional

from pydantic import EmailStr

from core.events import (
    CampaignSummary,
    DomainEvent,
    EventPayload,
    EventType,
    Identifier,
    ServiceSource,
    UserRef,
)

from ..constants import StoreType


# =============================================================================
# Nested shapes
# =============================================================================


class StoreRef(EventPayload):
    id: Identifier
    name: str
    code: Optional[str] = None


class StoreDetails(StoreRef):
    store_type: Optional[StoreType] = None


class OccupantRef(EventPayload):
    """Actor occupying a store"""
    id: Identifier
    full_name: str
    actor_type: str
    email: Optional[EmailStr] = None


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class OccupantAssignedPayload(EventPayload):
    """occupant.assigned event data"""
    store: StoreRef
    actor: OccupantRef
    assigned_by: UserRef


class OccupantUnassignedPayload(EventPayload):
    """occupant.unassigned event data"""
    store: StoreRef
    actor: OccupantRef
    unassigned_by: UserRef


class StoreActivatedPayload(EventPayload):
    """store.activated event data"""
    store: StoreDetails
    campaign: CampaignSummary
    activated_by: UserRef


class StoreDeactivatedPayload(EventPayload):
    """store.deactivated event data"""
    store: StoreDetails
    campaign: CampaignSummary
    deactivated_by: UserRef


# =============================================================================
# Envelope variants
# =============================================================================


class StoreEvent(DomainEvent):
    source: str = ServiceSource.STORE_SERVICE.value


class OccupantAssignedEvent(StoreEvent):
    type: Literal["occupant.assigned"] = EventType.OCCUPANT_ASSIGNED.value
    data: OccupantAssignedPayload


class OccupantUnassignedEvent(StoreEvent):
    type: Literal["occupant.unassigned"] = EventType.OCCUPANT_UNASSIGNED.value
    data: OccupantUnassignedPayload


class StoreActivatedEvent(StoreEvent):
    type: Literal["store.activated"] = EventType.STORE_ACTIVATED.value
    data: StoreActivatedPayload


class StoreDeactivatedEvent(StoreEvent):
    type: Literal["store.deactivated"] = EventType.STORE_DEACTIVATED.value
    data: StoreDeactivatedPayload


STORE_EVENTS = (
    OccupantAssignedEvent,
    OccupantUnassignedEvent,
    StoreActivatedEvent,
    StoreDeactivatedEvent,
)
