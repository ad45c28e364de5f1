"""
Campaign Service Events Module
"""

from .models import (
    CAMPAIGN_EVENTS,
    BuyerConventionsStatusEvent,
    BuyerConventionsStatusPayload,
    BuyerRef,
    CampaignActivatedEvent,
    CampaignActivatedPayload,
    CampaignAggregate,
    ConventionsData,
    OpaConventionsStatusEvent,
    OpaConventionsStatusPayload,
    OpaRef,
    StoresStatusEvent,
    StoresStatusPayload,
)
from .publishers import CampaignEventPublisher

__all__ = [
    "CAMPAIGN_EVENTS",
    "CampaignEventPublisher",
    "BuyerConventionsStatusEvent",
    "BuyerConventionsStatusPayload",
    "BuyerRef",
    "CampaignActivatedEvent",
    "CampaignActivatedPayload",
    "CampaignAggregate",
    "ConventionsData",
    "OpaConventionsStatusEvent",
    "OpaConventionsStatusPayload",
    "OpaRef",
    "StoresStatusEvent",
    "StoresStatusPayload",
]
