"""
Convention Event Data Models

A convention binds a buyer/exporter to an OPA (``producers``) for a set of
products. Dates are display strings (``dd/MM/yyyy``).
"""

from typing import List, Literal, Optional

from pydantic import NonNegativeFloat, NonNegativeInt

from core.events import (
    CampaignSummary,
    DomainEvent,
    EventPayload,
    EventType,
    Identifier,
    ServiceSource,
)


# =============================================================================
# Nested shapes
# =============================================================================


class ConventionProductLine(EventPayload):
    """Product line as signed"""
    code: str
    name: str
    quantity: NonNegativeFloat
    unit: str


class ConventionProductDetails(EventPayload):
    """Product line after an amendment, with quality attributes as labels"""
    code: str
    name: str
    quality: Optional[str] = None
    standard: Optional[str] = None
    weight: Optional[NonNegativeFloat] = None
    bags: Optional[NonNegativeInt] = None
    price_per_kg: Optional[NonNegativeFloat] = None
    humidity: Optional[NonNegativeFloat] = None


class ConventionRef(EventPayload):
    id: Identifier
    code: str
    signature_date: str


class SignedConvention(ConventionRef):
    products: List[ConventionProductLine]


class AmendedConvention(ConventionRef):
    products: List[ConventionProductDetails]


class BuyerExporterRef(EventPayload):
    id: Identifier
    full_name: str
    actor_type: str


class ProducersRef(EventPayload):
    """The OPA party"""
    id: Identifier
    full_name: str


class ConventionAuthor(EventPayload):
    """User behind the change; ``actor_id`` is None for platform staff"""
    id: Identifier
    full_name: str
    actor_id: Optional[str] = None


class ConventionChanges(EventPayload):
    signature_date_changed: bool
    products_changed: bool
    old_signature_date: Optional[str] = None
    new_signature_date: Optional[str] = None


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class ConventionCreatedPayload(EventPayload):
    """convention.created event data"""
    convention: SignedConvention
    buyer_exporter: BuyerExporterRef
    producers: ProducersRef
    created_by: ConventionAuthor

    @property
    def created_by_opa(self) -> bool:
        return self.created_by.actor_id == self.producers.id


class ConventionUpdatedPayload(EventPayload):
    """convention.updated event data"""
    convention: AmendedConvention
    changes: ConventionChanges
    buyer_exporter: BuyerExporterRef
    producers: ProducersRef
    updated_by: ConventionAuthor


class ConventionAssociatedToCampaignPayload(EventPayload):
    """convention.associated-to-campaign event data"""
    convention: ConventionRef
    campaign: CampaignSummary
    buyer_exporter: BuyerExporterRef
    producers: ProducersRef
    associated_by: ConventionAuthor


class ConventionDissociatedFromCampaignPayload(EventPayload):
    """convention.dissociated-from-campaign event data"""
    convention: ConventionRef
    campaign: CampaignSummary
    buyer_exporter: BuyerExporterRef
    producers: ProducersRef
    dissociated_by: ConventionAuthor


# =============================================================================
# Envelope variants
# =============================================================================


class ConventionEvent(DomainEvent):
    source: str = ServiceSource.CONVENTION_SERVICE.value


class ConventionCreatedEvent(ConventionEvent):
    type: Literal["convention.created"] = EventType.CONVENTION_CREATED.value
    data: ConventionCreatedPayload


class ConventionUpdatedEvent(ConventionEvent):
    type: Literal["convention.updated"] = EventType.CONVENTION_UPDATED.value
    data: ConventionUpdatedPayload


class ConventionAssociatedToCampaignEvent(ConventionEvent):
    type: Literal["convention.associated-to-campaign"] = EventType.CONVENTION_ASSOCIATED_TO_CAMPAIGN.value
    data: ConventionAssociatedToCampaignPayload


class ConventionDissociatedFromCampaignEvent(ConventionEvent):
    type: Literal["convention.dissociated-from-campaign"] = EventType.CONVENTION_DISSOCIATED_FROM_CAMPAIGN.value
    data: ConventionDissociatedFromCampaignPayload


CONVENTION_EVENTS = (
    ConventionCreatedEvent,
    ConventionUpdatedEvent,
    ConventionAssociatedToCampaignEvent,
    ConventionDissociatedFromCampaignEvent,
)
