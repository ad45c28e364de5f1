"""
Convention Event Publishers

Raised after the convention change is committed; both parties are told.
"""

import logging
from typing import Any, Mapping, Union

from core.event_bus import EventPublisherBase
from core.events import CampaignSummary

from .models import (
    AmendedConvention,
    BuyerExporterRef,
    ConventionAssociatedToCampaignEvent,
    ConventionAssociatedToCampaignPayload,
    ConventionAuthor,
    ConventionChanges,
    ConventionCreatedEvent,
    ConventionCreatedPayload,
    ConventionDissociatedFromCampaignEvent,
    ConventionDissociatedFromCampaignPayload,
    ConventionRef,
    ConventionUpdatedEvent,
    ConventionUpdatedPayload,
    ProducersRef,
    SignedConvention,
)

logger = logging.getLogger(__name__)

Shape = Mapping[str, Any]


class ConventionEventPublisher(EventPublisherBase):
    """Publisher for convention events"""

    async def publish_convention_created(
        self,
        convention: Union[SignedConvention, Shape],
        buyer_exporter: Union[BuyerExporterRef, Shape],
        producers: Union[ProducersRef, Shape],
        created_by: Union[ConventionAuthor, Shape],
    ) -> bool:
        """Publish convention.created event"""
        data = ConventionCreatedPayload(
            convention=convention,
            buyer_exporter=buyer_exporter,
            producers=producers,
            created_by=created_by,
        )
        return await self.publish(ConventionCreatedEvent(data=data))

    async def publish_convention_updated(
        self,
        convention: Union[AmendedConvention, Shape],
        changes: Union[ConventionChanges, Shape],
        buyer_exporter: Union[BuyerExporterRef, Shape],
        producers: Union[ProducersRef, Shape],
        updated_by: Union[ConventionAuthor, Shape],
    ) -> bool:
        """
        Publish convention.updated event

        Args:
            convention: Convention after the amendment
            changes: Which parts changed; old/new signature dates only when it did
            buyer_exporter: Buyer or exporter party
            producers: OPA party
            updated_by: User who made the change
        """
        data = ConventionUpdatedPayload(
            convention=convention,
            changes=changes,
            buyer_exporter=buyer_exporter,
            producers=producers,
            updated_by=updated_by,
        )
        return await self.publish(ConventionUpdatedEvent(data=data))

    async def publish_convention_associated_to_campaign(
        self,
        convention: Union[ConventionRef, Shape],
        campaign: Union[CampaignSummary, Shape],
        buyer_exporter: Union[BuyerExporterRef, Shape],
        producers: Union[ProducersRef, Shape],
        associated_by: Union[ConventionAuthor, Shape],
    ) -> bool:
        """Publish convention.associated-to-campaign event"""
        data = ConventionAssociatedToCampaignPayload(
            convention=convention,
            campaign=campaign,
            buyer_exporter=buyer_exporter,
            producers=producers,
            associated_by=associated_by,
        )
        return await self.publish(ConventionAssociatedToCampaignEvent(data=data))

    async def publish_convention_dissociated_from_campaign(
        self,
        convention: Union[ConventionRef, Shape],
        campaign: Union[CampaignSummary, Shape],
        buyer_exporter: Union[BuyerExporterRef, Shape],
        producers: Union[ProducersRef, Shape],
        dissociated_by: Union[ConventionAuthor, Shape],
    ) -> bool:
        """Publish convention.dissociated-from-campaign event"""
        data = ConventionDissociatedFromCampaignPayload(
            convention=convention,
            campaign=campaign,
            buyer_exporter=buyer_exporter,
            producers=producers,
            dissociated_by=dissociated_by,
        )
        return await self.publish(ConventionDissociatedFromCampaignEvent(data=data))
