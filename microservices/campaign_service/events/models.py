"""
Campaign Event Data Models

Event type definitions and data structures for campaign activation events.
"""

from typing import Literal

from pydantic import ConfigDict, NonNegativeInt, model_validator

from core.events import (
    ActivatedByRef,
    CampaignSummary,
    DomainEvent,
    EventPayload,
    EventType,
    Identifier,
    ServiceSource,
    UserRef,
)


# =============================================================================
# Nested shapes
# =============================================================================


class CampaignAggregate(EventPayload):
    """
    Full campaign record as owned by the campaign store.

    Only ``id`` and ``code`` are required here; every other attribute
    (``startDate``, ``endDate``, ``status`` ...) is carried through unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: Identifier
    code: str


class ConventionsData(EventPayload):
    """Convention counters of one actor for the campaign"""
    total_conventions: NonNegativeInt
    active_conventions: NonNegativeInt
    inactive_conventions: NonNegativeInt

    @model_validator(mode="after")
    def check_counts(self):
        if self.active_conventions + self.inactive_conventions != self.total_conventions:
            raise ValueError("activeConventions + inactiveConventions must equal totalConventions")
        return self


class OpaRef(EventPayload):
    id: Identifier
    full_name: str


class BuyerRef(EventPayload):
    id: Identifier
    full_name: str
    actor_type: str


# =============================================================================
# Event Data Models - Published Events
# =============================================================================


class CampaignActivatedPayload(EventPayload):
    """campaign.activated event data"""
    campaign: CampaignAggregate
    activated_by: UserRef


class OpaConventionsStatusPayload(EventPayload):
    """campaign.opa-conventions-status event data"""
    campaign: CampaignSummary
    opa: OpaRef
    conventions_data: ConventionsData
    activated_by: ActivatedByRef


class BuyerConventionsStatusPayload(EventPayload):
    """campaign.buyer-conventions-status event data"""
    campaign: CampaignSummary
    buyer: BuyerRef
    conventions_data: ConventionsData
    activated_by: ActivatedByRef


class StoresStatusPayload(EventPayload):
    """campaign.stores-status event data"""
    campaign: CampaignSummary
    total_stores: NonNegativeInt
    active_stores: NonNegativeInt
    inactive_stores: NonNegativeInt
    activated_by: ActivatedByRef

    @model_validator(mode="after")
    def check_counts(self):
        if self.active_stores + self.inactive_stores != self.total_stores:
            raise ValueError("activeStores + inactiveStores must equal totalStores")
        return self


# =============================================================================
# Envelope variants
# =============================================================================


class CampaignEvent(DomainEvent):
    source: str = ServiceSource.CAMPAIGN_SERVICE.value


class CampaignActivatedEvent(CampaignEvent):
    type: Literal["campaign.activated"] = EventType.CAMPAIGN_ACTIVATED.value
    data: CampaignActivatedPayload


class OpaConventionsStatusEvent(CampaignEvent):
    type: Literal["campaign.opa-conventions-status"] = EventType.OPA_CONVENTIONS_STATUS.value
    data: OpaConventionsStatusPayload


class BuyerConventionsStatusEvent(CampaignEvent):
    type: Literal["campaign.buyer-conventions-status"] = EventType.BUYER_CONVENTIONS_STATUS.value
    data: BuyerConventionsStatusPayload


class StoresStatusEvent(CampaignEvent):
    type: Literal["campaign.stores-status"] = EventType.STORES_STATUS.value
    data: StoresStatusPayload


CAMPAIGN_EVENTS = (
    CampaignActivatedEvent,
    OpaConventionsStatusEvent,
    BuyerConventionsStatusEvent,
    StoresStatusEvent,
)
