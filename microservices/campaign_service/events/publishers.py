"""
Campaign Event Publishers

Raised once a campaign activation is committed. The status audits tell
basin admins and actor managers what is not yet attached to the new
campaign.
"""

import logging
from typing import Any, Mapping, Union

from core.event_bus import EventPublisherBase
from core.events import ActivatedByRef, CampaignSummary, UserRef

from .models import (
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

logger = logging.getLogger(__name__)



class CampaignEventPublisher(EventPublisherBase):
    """
    Publisher for campaign events.

    Nested arguments accept either the payload model or a plain mapping
    (camelCase or snake_case keys).
    """

    async def publish_campaign_activated(
        self,
        campaign: Union[CampaignAggregate, Mapping[str, Any]],
        activated_by: Union[UserRef, Mapping[str, Any]],
    ) -> bool:
        """Publish campaign.activated event"""
        data = CampaignActivatedPayload(campaign=campaign, activated_by=activated_by)
        return await self.publish(CampaignActivatedEvent(data=data))

    async def publish_opa_conventions_status(
        self,
        campaign: Union[CampaignSummary, Mapping[str, Any]],
        opa: Union[OpaRef, Mapping[str, Any]],
        conventions_data: Union[ConventionsData, Mapping[str, Any]],
        activated_by: Union[ActivatedByRef, Mapping[str, Any]],
    ) -> bool:
        """Publish campaign.opa-conventions-status event"""
        data = OpaConventionsStatusPayload(
            campaign=campaign,
            opa=opa,
            conventions_data=conventions_data,
            activated_by=activated_by,
        )
        return await self.publish(OpaConventionsStatusEvent(data=data))

    async def publish_buyer_conventions_status(
        self,
        campaign: Union[CampaignSummary, Mapping[str, Any]],
        buyer: Union[BuyerRef, Mapping[str, Any]],
        conventions_data: Union[ConventionsData, Mapping[str, Any]],
        activated_by: Union[ActivatedByRef, Mapping[str, Any]],
    ) -> bool:
        """Publish campaign.buyer-conventions-status event"""
        data = BuyerConventionsStatusPayload(
            campaign=campaign,
            buyer=buyer,
            conventions_data=conventions_data,
            activated_by=activated_by,
        )
        return await self.publish(BuyerConventionsStatusEvent(data=data))

    async def publish_stores_status(
        self,
        campaign: Union[CampaignSummary, Mapping[str, Any]],
        total_stores: int,
        active_stores: int,
        inactive_stores: int,
        activated_by: Union[ActivatedByRef, Mapping[str, Any]],
    ) -> bool:
        """Publish campaign.stores-status event"""
        data = StoresStatusPayload(
            campaign=campaign,
            total_stores=total_stores,
            active_stores=active_stores,
            inactive_stores=inactive_stores,
            activated_by=activated_by,
        )
        return await self.publish(StoresStatusEvent(data=data))
