"""
Event Handlers for Notification Service

Turns domain events from the other services into e-mails
"""

import logging
from typing import Awaitable, Callable, Dict, List, Tuple

from core.config.email_config import EmailConfig
from core.event_bus import EventBusProtocol
from core.events import DomainEvent, EventType

from ..models import EmailMessage, NotificationResult, Recipient, RenderedEmail
from ..protocols import EmailClientProtocol, RecipientDirectoryProtocol
from ..templates import EmailTemplates, Partner

logger = logging.getLogger(__name__)

# Roles notified of a campaign activation
CAMPAIGN_AUDIENCE_ROLES = ("basin_admin", "technical_admin", "actor_manager")
# Roles told about stores left out of a campaign
STORES_STATUS_ROLES = ("basin_admin",)

MAX_PROCESSED_EVENTS = 10000

Delivery = Tuple[Recipient, RenderedEmail]
DeliveryPlanner = Callable[[DomainEvent], Awaitable[List[Delivery]]]

# Partner type shown to buyer/exporter users for the OPA side of a convention
OPA_PARTNER_TYPE = "OPA"


def _opa_side(p) -> Partner:
    return (p.producers.full_name, OPA_PARTNER_TYPE)


def _buyer_side(p) -> Partner:
    return (p.buyer_exporter.full_name, p.buyer_exporter.actor_type)


class NotificationEventHandler:
    """One planner per event kind: resolve recipients, render, then send"""

    def __init__(
        self,
        directory: RecipientDirectoryProtocol,
        email_client: EmailClientProtocol,
        email_config: EmailConfig,
    ):
        self.directory = directory
        self.email_client = email_client
        self.templates = EmailTemplates(email_config)
        # Processed event IDs in arrival order, for idempotency
        self.processed_event_ids: Dict[str, None] = {}

    def is_event_processed(self, event_id: str) -> bool:
        return event_id in self.processed_event_ids

    def mark_event_processed(self, event_id: str):
        self.processed_event_ids[event_id] = None
        if len(self.processed_event_ids) > MAX_PROCESSED_EVENTS:
            # Keep the newest half
            newest = list(self.processed_event_ids)[-(MAX_PROCESSED_EVENTS // 2):]
            self.processed_event_ids = dict.fromkeys(newest)

    async def subscribe(self, bus: EventBusProtocol) -> None:
        for event_type in self.get_event_handler_map():
            await bus.subscribe(event_type, self.handle_event)

    async def handle_event(self, event: DomainEvent) -> NotificationResult:
        """Entry point for the bus; delivery problems are reported, never raised"""
        result = NotificationResult(event_id=event.id, event_type=event.type)

        if self.is_event_processed(event.id):
            logger.debug(f"Event {event.id} already processed, skipping")
            result.skipped = True
            return result

        planner = self.get_event_handler_map().get(event.type)
        if planner is None:
            logger.warning(f"No notification handler for event type {event.type}")
            result.skipped = True
            return result

        try:
            deliveries = await planner(event)
        except Exception as e:
            logger.error(f"Failed to resolve recipients for {event.type} [{event.id}]: {e}")
            result.errors.append(str(e))
            return result

        for recipient, rendered in deliveries:
            message = EmailMessage(to=recipient.email, subject=rendered.subject, html=rendered.html)
            try:
                await self.email_client.send(message)
                result.sent += 1
            except Exception as e:
                result.failed += 1
                result.errors.append(f"{recipient.email}: {e}")
                logger.error(f"Failed to send {event.type} notification to {recipient.email}: {e}")

        self.mark_event_processed(event.id)
        logger.info(
            f"Notifications for {event.type} [{event.id}]: "
            f"{result.sent} sent, {result.failed} failed"
        )
        return result

    # ====================
    # Actor events
    # ====================

    async def _to_actor_managers(self, actor_id: str, render) -> List[Delivery]:
        recipients = await self.directory.actor_managers(actor_id)
        return [(r, render(r.name)) for r in recipients]

    async def handle_actor_activated(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(p.actor_id, lambda name: self.templates.actor_activated(name, p))

    async def handle_actor_deactivated(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(p.actor_id, lambda name: self.templates.actor_deactivated(name, p))

    async def handle_producer_added_to_opa(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(p.opa_id, lambda name: self.templates.producer_added_to_opa(name, p))

    async def handle_producer_removed_from_opa(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.opa_id, lambda name: self.templates.producer_removed_from_opa(name, p)
        )

    async def handle_buyer_added_to_exporter(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.exporter_id, lambda name: self.templates.buyer_added_to_exporter(name, p)
        )

    async def handle_buyer_removed_from_exporter(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.exporter_id, lambda name: self.templates.buyer_removed_from_exporter(name, p)
        )

    async def handle_buyer_assigned_as_mandataire(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.buyer_id, lambda name: self.templates.buyer_assigned_as_mandataire(name, p)
        )

    async def handle_buyer_unassigned_as_mandataire(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.buyer_id, lambda name: self.templates.buyer_unassigned_as_mandataire(name, p)
        )

    # ====================
    # Campaign events
    # ====================

    async def handle_campaign_activated(self, event) -> List[Delivery]:
        p = event.data
        recipients = await self.directory.users_with_roles(CAMPAIGN_AUDIENCE_ROLES)
        return [(r, self.templates.campaign_activated(r.name, p)) for r in recipients]

    async def handle_stores_status(self, event) -> List[Delivery]:
        p = event.data
        if p.inactive_stores == 0:
            logger.debug(f"All stores active for campaign {p.campaign.code}, nothing to send")
            return []
        recipients = await self.directory.users_with_roles(STORES_STATUS_ROLES)
        return [(r, self.templates.stores_status(r.name, p)) for r in recipients]

    async def handle_opa_conventions_status(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.opa.id, lambda name: self.templates.opa_conventions_status(name, p)
        )

    async def handle_buyer_conventions_status(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.buyer.id, lambda name: self.templates.buyer_conventions_status(name, p)
        )

    # ====================
    # Convention events
    # ====================

    async def _to_convention_parties(self, p, render_for_buyer, render_for_opa) -> List[Delivery]:
        """Active users of the buyer/exporter, then of the OPA"""
        buyer_users = await self.directory.active_actor_users(p.buyer_exporter.id)
        opa_users = await self.directory.active_actor_users(p.producers.id)
        return (
            [(r, render_for_buyer(r.name)) for r in buyer_users]
            + [(r, render_for_opa(r.name)) for r in opa_users]
        )

    async def handle_convention_created(self, event) -> List[Delivery]:
        p = event.data
        if p.created_by_opa:
            render_for_opa = lambda name: self.templates.convention_created_summary(name, p)
        else:
            render_for_opa = lambda name: self.templates.convention_created(name, p, _buyer_side(p))
        return await self._to_convention_parties(
            p, lambda name: self.templates.convention_created(name, p, _opa_side(p)), render_for_opa
        )

    async def handle_convention_updated(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_convention_parties(
            p,
            lambda name: self.templates.convention_updated(name, p, _opa_side(p)),
            lambda name: self.templates.convention_updated(name, p, _buyer_side(p)),
        )

    async def handle_convention_associated_to_campaign(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_convention_parties(
            p,
            lambda name: self.templates.convention_associated_to_campaign(name, p, _opa_side(p)),
            lambda name: self.templates.convention_associated_to_campaign(name, p, _buyer_side(p)),
        )

    async def handle_convention_dissociated_from_campaign(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_convention_parties(
            p,
            lambda name: self.templates.convention_dissociated_from_campaign(name, p, _opa_side(p)),
            lambda name: self.templates.convention_dissociated_from_campaign(name, p, _buyer_side(p)),
        )

    # ====================
    # Store events
    # ====================

    async def handle_occupant_assigned(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(p.actor.id, lambda name: self.templates.occupant_assigned(name, p))

    async def handle_occupant_unassigned(self, event) -> List[Delivery]:
        p = event.data
        return await self._to_actor_managers(
            p.actor.id, lambda name: self.templates.occupant_unassigned(name, p)
        )

    async def handle_store_activated(self, event) -> List[Delivery]:
        p = event.data
        recipients = await self.directory.store_occupant_managers(p.store.id)
        return [
            (r, self.templates.store_activated(r.name, p, r.actor_name or r.name))
            for r in recipients
        ]

    async def handle_store_deactivated(self, event) -> List[Delivery]:
        p = event.data
        recipients = await self.directory.store_occupant_managers(p.store.id)
        return [
            (r, self.templates.store_deactivated(r.name, p, r.actor_name or r.name))
            for r in recipients
        ]

    # ====================
    # User events
    # ====================

    async def handle_account_activated(self, event) -> List[Delivery]:
        p = event.data
        return [(Recipient(email=p.email, name=p.user_name), self.templates.account_activated(p))]

    async def handle_account_deactivated(self, event) -> List[Delivery]:
        p = event.data
        return [(Recipient(email=p.email, name=p.user_name), self.templates.account_deactivated(p))]

    async def handle_actor_manager_welcome(self, event) -> List[Delivery]:
        p = event.data
        return [(Recipient(email=p.email, name=p.user_name), self.templates.actor_manager_welcome(p))]

    def get_event_handler_map(self) -> Dict[str, DeliveryPlanner]:
        """
        Return mapping of event types to handler functions
        """
        return {
            EventType.ACTOR_ACTIVATED.value: self.handle_actor_activated,
            EventType.ACTOR_DEACTIVATED.value: self.handle_actor_deactivated,
            EventType.PRODUCER_ADDED_TO_OPA.value: self.handle_producer_added_to_opa,
            EventType.PRODUCER_REMOVED_FROM_OPA.value: self.handle_producer_removed_from_opa,
            EventType.BUYER_ADDED_TO_EXPORTER.value: self.handle_buyer_added_to_exporter,
            EventType.BUYER_REMOVED_FROM_EXPORTER.value: self.handle_buyer_removed_from_exporter,
            EventType.BUYER_ASSIGNED_AS_MANDATAIRE.value: self.handle_buyer_assigned_as_mandataire,
            EventType.BUYER_UNASSIGNED_AS_MANDATAIRE.value: self.handle_buyer_unassigned_as_mandataire,
            EventType.CAMPAIGN_ACTIVATED.value: self.handle_campaign_activated,
            EventType.STORES_STATUS.value: self.handle_stores_status,
            EventType.OPA_CONVENTIONS_STATUS.value: self.handle_opa_conventions_status,
            EventType.BUYER_CONVENTIONS_STATUS.value: self.handle_buyer_conventions_status,
            EventType.CONVENTION_CREATED.value: self.handle_convention_created,
            EventType.CONVENTION_UPDATED.value: self.handle_convention_updated,
            EventType.CONVENTION_ASSOCIATED_TO_CAMPAIGN.value: self.handle_convention_associated_to_campaign,
            EventType.CONVENTION_DISSOCIATED_FROM_CAMPAIGN.value: self.handle_convention_dissociated_from_campaign,
            EventType.OCCUPANT_ASSIGNED.value: self.handle_occupant_assigned,
            EventType.OCCUPANT_UNASSIGNED.value: self.handle_occupant_unassigned,
            EventType.STORE_ACTIVATED.value: self.handle_store_activated,
            EventType.STORE_DEACTIVATED.value: self.handle_store_deactivated,
            EventType.ACCOUNT_ACTIVATED.value: self.handle_account_activated,
            EventType.ACCOUNT_DEACTIVATED.value: self.handle_account_deactivated,
            EventType.ACTOR_MANAGER_WELCOME.value: self.handle_actor_manager_welcome,
        }
