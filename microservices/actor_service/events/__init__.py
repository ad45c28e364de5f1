"""
Actor Service Events Module
"""

from .models import (
    ACTOR_EVENTS,
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
from .publishers import ActorEventPublisher

__all__ = [
    "ACTOR_EVENTS",
    "ActorEventPublisher",
    "ActorActivatedEvent",
    "ActorActivatedPayload",
    "ActorDeactivatedEvent",
    "ActorDeactivatedPayload",
    "BuyerAddedToExporterEvent",
    "BuyerAddedToExporterPayload",
    "BuyerAssignedAsMandataireEvent",
    "BuyerAssignedAsMandatairePayload",
    "BuyerRemovedFromExporterEvent",
    "BuyerRemovedFromExporterPayload",
    "BuyerUnassignedAsMandataireEvent",
    "BuyerUnassignedAsMandatairePayload",
    "ProducerAddedToOpaEvent",
    "ProducerAddedToOpaPayload",
    "ProducerRemovedFromOpaEvent",
    "ProducerRemovedFromOpaPayload",
]
