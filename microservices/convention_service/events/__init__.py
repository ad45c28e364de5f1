"""
Convention Service Events Module
"""

from .models import (
    CONVENTION_EVENTS,
    ConventionAssociatedToCampaignEvent,
    ConventionAssociatedToCampaignPayload,
    ConventionCreatedEvent,
    ConventionCreatedPayload,
    ConventionDissociatedFromCampaignEvent,
    ConventionDissociatedFromCampaignPayload,
    ConventionUpdatedEvent,
    ConventionUpdatedPayload,
)
from .publishers import ConventionEventPublisher

__all__ = [
    "CONVENTION_EVENTS",
    "ConventionEventPublisher",
    "ConventionCreatedEvent",
    "ConventionCreatedPayload",
    "ConventionUpdatedEvent",
    "ConventionUpdatedPayload",
    "ConventionAssociatedToCampaignEvent",
    "ConventionAssociatedToCampaignPayload",
    "ConventionDissociatedFromCampaignEvent",
    "ConventionDissociatedFromCampaignPayload",
]
