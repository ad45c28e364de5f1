"""
Production Basin Service Factory

Builds the database client, repository, lookup and service from the
platform configuration.
"""

import logging
from typing import Optional

from core.config import PlatformConfig
from core.postgres_client import PostgresClient

from .production_basin_repository import PostgresUserLookup, ProductionBasinRepository
from .production_basin_service import ProductionBasinService

logger = logging.getLogger(__name__)

SERVICE_NAME = "production_basin_service"


class ProductionBasinServiceFactory:
    """Factory for creating production basin service components"""

    def __init__(self, settings: PlatformConfig):
        self.settings = settings
        self._db: Optional[PostgresClient] = None
        self._repository: Optional[ProductionBasinRepository] = None
        self._service: Optional[ProductionBasinService] = None

    async def initialize(self) -> None:
        logger.info("Initializing Production Basin Service components...")

        self._db = PostgresClient.from_config(SERVICE_NAME, self.settings.infrastructure)
        await self._db.connect()

        self._repository = ProductionBasinRepository(self._db)
        self._service = ProductionBasinService(
            repository=self._repository,
            user_lookup=PostgresUserLookup(self._db),
        )

        logger.info("Production Basin Service components initialized")

    async def close(self) -> None:
        if self._db:
            await self._db.close()
        logger.info("Production Basin Service components closed")

    @property
    def repository(self) -> ProductionBasinRepository:
        if not self._repository:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._repository

    @property
    def service(self) -> ProductionBasinService:
        if not self._service:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._service
