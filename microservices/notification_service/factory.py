"""
Notification Service Factory

Builds the recipient directory, e-mail client, event handler and the NATS
subscription from the platform configuration.
"""

import logging
from typing import Optional, Union

from core.config import PlatformConfig
from core.nats_client import NATSEventBus
from core.postgres_client import PostgresClient

from .email_client import LogOnlyEmailClient, ResendEmailClient
from .events.handlers import NotificationEventHandler
from .events.models import parse_event
from .recipient_directory import PostgresRecipientDirectory

logger = logging.getLogger(__name__)

SERVICE_NAME = "notification_service"


def create_email_client(settings: PlatformConfig) -> Union[ResendEmailClient, LogOnlyEmailClient]:
    if settings.email.enabled:
        return ResendEmailClient.from_config(settings.email)
    logger.warning("RESEND_API_KEY not set, notification e-mails will only be logged")
    return LogOnlyEmailClient()


class NotificationServiceFactory:
    """Factory for creating notification service components"""

    def __init__(self, settings: PlatformConfig):
        self.settings = settings
        self._db: Optional[PostgresClient] = None
        self._bus: Optional[NATSEventBus] = None
        self._email_client: Optional[Union[ResendEmailClient, LogOnlyEmailClient]] = None
        self._handler: Optional[NotificationEventHandler] = None

    async def initialize(self) -> None:
        logger.info("Initializing Notification Service components...")

        self._db = PostgresClient.from_config(SERVICE_NAME, self.settings.infrastructure)
        await self._db.connect()

        self._email_client = create_email_client(self.settings)
        self._handler = NotificationEventHandler(
            directory=PostgresRecipientDirectory(self._db),
            email_client=self._email_client,
            email_config=self.settings.email,
        )

        self._bus = NATSEventBus.from_config(
            SERVICE_NAME, self.settings.infrastructure, decoder=parse_event
        )
        await self._bus.connect()
        await self._handler.subscribe(self._bus)

        logger.info("Notification Service components initialized")

    async def close(self) -> None:
        if self._bus:
            await self._bus.close()
        if self._email_client:
            await self._email_client.close()
        if self._db:
            await self._db.close()
        logger.info("Notification Service components closed")

    @property
    def db(self) -> PostgresClient:
        if not self._db:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._db

    @property
    def bus(self) -> NATSEventBus:
        if not self._bus:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._bus

    @property
    def handler(self) -> NotificationEventHandler:
        if not self._handler:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._handler
