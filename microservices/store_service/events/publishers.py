"""
Store Event Publishers
"""

import logging
from typing import Any, Mapping, Union

from core.event_bus import EventPublisherBase
from core.events import CampaignSummary, UserRef

from .models import (
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

logger = logging.getLogger(__name__)


class StoreEventPublisher(EventPublisherBase):
    """Publisher for store and occupancy events"""

    async def publish_occupant_assigned(
        self,
        store: Union[StoreRef, Mapping[str, Any]],
        actor: Union[OccupantRef, Mapping[str, Any]],
        assigned_by: Union[UserRef, Mapping[str, Any]],
    ) -> bool:
        """Publish occupant.assigned event"""
        data = OccupantAssignedPayload(store=store, actor=actor, assigned_by=assigned_by)
        return await self.publish(OccupantAssignedEvent(data=data))

    async def publish_occupant_unassigned(
        self,
        store: Union[StoreRef, Mapping[str, Any]],
        actor: Union[OccupantRef, Mapping[str, Any]],
        unassigned_by: Union[UserRef, Mapping[str, Any]],
    ) -> bool:
        """Publish occupant.unassigned event"""
        data = OccupantUnassignedPayload(store=store, actor=actor, unassigned_by=unassigned_by)
        return await self.publish(OccupantUnassignedEvent(data=data))

    async def publish_store_activated(
        self,
        store: Union[StoreDetails, Mapping[str, Any]],
        campaign: Union[CampaignSummary, Mapping[str, Any]],
        activated_by: Union[UserRef, Mapping[str, Any]],
    ) -> bool:
        """Publish store.activated event"""
        data = StoreActivatedPayload(store=store, campaign=campaign, activated_by=activated_by)
        return await self.publish(StoreActivatedEvent(data=data))

    async def publish_store_deactivated(
        self,
        store: Union[StoreDetails, Mapping[str, Any]],
        campaign: Union[CampaignSummary, Mapping[str, Any]],
        deactivated_by: Union[UserRef, Mapping[str, Any]],
    ) -> bool:
        """Publish store.deactivated event"""
        data = StoreDeactivatedPayload(store=store, campaign=campaign, deactivated_by=deactivated_by)
        return await self.publish(StoreDeactivatedEvent(data=data))
