"""
Actor Event Data Models

Payloads and envelope variants for actor relationship and status events.
The four buyer/exporter assignment payloads share a shape but stay separate
types so each event can evolve on its own.
"""

from typing import Literal

from core.events import DomainEvent, EventPayload, EventType, Identifier, ServiceSource


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class BuyerAddedToExporterPayload(EventPayload):
    """actor.buyer-added-to-exporter event data"""
    exporter_id: Identifier
    exporter_name: str
    buyer_id: Identifier
    buyer_name: str


class BuyerRemovedFromExporterPayload(EventPayload):
    """actor.buyer-removed-from-exporter event data"""
    exporter_id: Identifier
    exporter_name: str
    buyer_id: Identifier
    buyer_name: str


class BuyerAssignedAsMandatairePayload(EventPayload):
    """actor.buyer-assigned-as-mandataire event data"""
    buyer_id: Identifier
    buyer_name: str
    exporter_id: Identifier
    exporter_name: str


class BuyerUnassignedAsMandatairePayload(EventPayload):
    """actor.buyer-unassigned-as-mandataire event data"""
    buyer_id: Identifier
    buyer_name: str
    exporter_id: Identifier
    exporter_name: str


class ProducerAddedToOpaPayload(EventPayload):
    """actor.producer-added-to-opa event data"""
    opa_id: Identifier
    opa_name: str
    producer_id: Identifier
    producer_name: str


class ProducerRemovedFromOpaPayload(EventPayload):
    """actor.producer-removed-from-opa event data"""
    opa_id: Identifier
    opa_name: str
    producer_id: Identifier
    producer_name: str


class ActorActivatedPayload(EventPayload):
    """actor.activated event data"""
    actor_id: Identifier
    actor_name: str
    actor_type: str


class ActorDeactivatedPayload(EventPayload):
    """actor.deactivated event data"""
    actor_id: Identifier
    actor_name: str
    actor_type: str


# =============================================================================
# Envelope variants
# =============================================================================


class ActorEvent(DomainEvent):
    source: str = ServiceSource.ACTOR_SERVICE.value


class BuyerAddedToExporterEvent(ActorEvent):
    type: Literal["actor.buyer-added-to-exporter"] = EventType.BUYER_ADDED_TO_EXPORTER.value
    data: BuyerAddedToExporterPayload


class BuyerRemovedFromExporterEvent(ActorEvent):
    type: Literal["actor.buyer-removed-from-exporter"] = EventType.BUYER_REMOVED_FROM_EXPORTER.value
    data: BuyerRemovedFromExporterPayload


class BuyerAssignedAsMandataireEvent(ActorEvent):
    type: Literal["actor.buyer-assigned-as-mandataire"] = EventType.BUYER_ASSIGNED_AS_MANDATAIRE.value
    data: BuyerAssignedAsMandatairePayload


class BuyerUnassignedAsMandataireEvent(ActorEvent):
    type: Literal["actor.buyer-unassigned-as-mandataire"] = EventType.BUYER_UNASSIGNED_AS_MANDATAIRE.value
    data: BuyerUnassignedAsMandatairePayload


class ProducerAddedToOpaEvent(ActorEvent):
    type: Literal["actor.producer-added-to-opa"] = EventType.PRODUCER_ADDED_TO_OPA.value
    data: ProducerAddedToOpaPayload


class ProducerRemovedFromOpaEvent(ActorEvent):
    type: Literal["actor.producer-removed-from-opa"] = EventType.PRODUCER_REMOVED_FROM_OPA.value
    data: ProducerRemovedFromOpaPayload


class ActorActivatedEvent(ActorEvent):
    type: Literal["actor.activated"] = EventType.ACTOR_ACTIVATED.value
    data: ActorActivatedPayload


class ActorDeactivatedEvent(ActorEvent):
    type: Literal["actor.deactivated"] = EventType.ACTOR_DEACTIVATED.value
    data: ActorDeactivatedPayload


ACTOR_EVENTS = (
    BuyerAddedToExporterEvent,
    BuyerRemovedFromExporterEvent,
    BuyerAssignedAsMandataireEvent,
    BuyerUnassignedAsMandataireEvent,
    ProducerAddedToOpaEvent,
    ProducerRemovedFromOpaEvent,
    ActorActivatedEvent,
    ActorDeactivatedEvent,
)
