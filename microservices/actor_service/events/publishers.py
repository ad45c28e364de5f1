"""
Actor Event Publishers

Called by the actor application service once a relationship or status
change is committed.
"""

import logging

from core.event_bus import EventPublisherBase

from .models import (
    ActorActivatedEvent,
    ActorActivatedPayload,
    ActorDeactivatedEvent,
    ActorDeactivatedPayload,
    BuyerAddedToExporterEvent,
    BuyerAddedToExporterPayload,
    BuyerAssignedAsMandataireEvent,
    BuyerAssignedAsMandatairePayload,
    BuyerRemovedFromExporterEvent,
    BuyerRemovedFromExporterPayload,
    BuyerUnassignedAsMandataireEvent,
    BuyerUnassignedAsMandatairePayload,
    ProducerAddedToOpaEvent,
    ProducerAddedToOpaPayload,
    ProducerRemovedFromOpaEvent,
    ProducerRemovedFromOpaPayload,
)

logger = logging.getLogger(__name__)


class ActorEventPublisher(EventPublisherBase):
    """Publisher for actor events"""

    # ====================
    # Exporter / buyer relationship
    # ====================

    async def publish_buyer_added_to_exporter(
        self, exporter_id: str, exporter_name: str, buyer_id: str, buyer_name: str
    ) -> bool:
        """Publish actor.buyer-added-to-exporter event"""
        data = BuyerAddedToExporterPayload(
            exporter_id=exporter_id,
            exporter_name=exporter_name,
            buyer_id=buyer_id,
            buyer_name=buyer_name,
        )
        return await self.publish(BuyerAddedToExporterEvent(data=data))

    async def publish_buyer_removed_from_exporter(
        self, exporter_id: str, exporter_name: str, buyer_id: str, buyer_name: str
    ) -> bool:
        """Publish actor.buyer-removed-from-exporter event"""
        data = BuyerRemovedFromExporterPayload(
            exporter_id=exporter_id,
            exporter_name=exporter_name,
            buyer_id=buyer_id,
            buyer_name=buyer_name,
        )
        return await self.publish(BuyerRemovedFromExporterEvent(data=data))

    async def publish_buyer_assigned_as_mandataire(
        self, buyer_id: str, buyer_name: str, exporter_id: str, exporter_name: str
    ) -> bool:
        """Publish actor.buyer-assigned-as-mandataire event"""
        data = BuyerAssignedAsMandatairePayload(
            buyer_id=buyer_id,
            buyer_name=buyer_name,
            exporter_id=exporter_id,
            exporter_name=exporter_name,
        )
        return await self.publish(BuyerAssignedAsMandataireEvent(data=data))

    async def publish_buyer_unassigned_as_mandataire(
        self, buyer_id: str, buyer_name: str, exporter_id: str, exporter_name: str
    ) -> bool:
        """Publish actor.buyer-unassigned-as-mandataire event"""
        data = BuyerUnassignedAsMandatairePayload(
            buyer_id=buyer_id,
            buyer_name=buyer_name,
            exporter_id=exporter_id,
            exporter_name=exporter_name,
        )
        return await self.publish(BuyerUnassignedAsMandataireEvent(data=data))

    # ====================
    # OPA / producer relationship
    # ====================

    async def publish_producer_added_to_opa(
        self, opa_id: str, opa_name: str, producer_id: str, producer_name: str
    ) -> bool:
        """Publish actor.producer-added-to-opa event"""
        data = ProducerAddedToOpaPayload(
            opa_id=opa_id, opa_name=opa_name, producer_id=producer_id, producer_name=producer_name
        )
        return await self.publish(ProducerAddedToOpaEvent(data=data))

    async def publish_producer_removed_from_opa(
        self, opa_id: str, opa_name: str, producer_id: str, producer_name: str
    ) -> bool:
        """Publish actor.producer-removed-from-opa event"""
        data = ProducerRemovedFromOpaPayload(
            opa_id=opa_id, opa_name=opa_name, producer_id=producer_id, producer_name=producer_name
        )
        return await self.publish(ProducerRemovedFromOpaEvent(data=data))

    # ====================
    # Status
    # ====================

    async def publish_actor_activated(self, actor_id: str, actor_name: str, actor_type: str) -> bool:
        """Publish actor.activated event"""
        data = ActorActivatedPayload(actor_id=actor_id, actor_name=actor_name, actor_type=actor_type)
        return await self.publish(ActorActivatedEvent(data=data))

    async def publish_actor_deactivated(self, actor_id: str, actor_name: str, actor_type: str) -> bool:
        """Publish actor.deactivated event"""
        data = ActorDeactivatedPayload(actor_id=actor_id, actor_name=actor_name, actor_type=actor_type)
        return await self.publish(ActorDeactivatedEvent(data=data))
