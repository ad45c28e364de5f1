"""
Notification Service Main Application

Consumes domain events from NATS JetStream and sends e-mails.
Port: 3341
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from core.config import load_settings
from core.logger import setup_from_config

from .factory import SERVICE_NAME, NotificationServiceFactory
from .models import HealthResponse

logger = logging.getLogger(__name__)

SERVICE_PORT = int(os.getenv("SERVICE_PORT", "3341"))
SERVICE_VERSION = "1.0.0"

# Global factory instance
factory: Optional[NotificationServiceFactory] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global factory

    settings = load_settings()
    setup_from_config(settings.logging, SERVICE_NAME)
    logger.info(f"Starting {SERVICE_NAME} on port {SERVICE_PORT}")

    factory = NotificationServiceFactory(settings)
    await factory.initialize()

    yield

    logger.info(f"Shutting down {SERVICE_NAME}")
    await factory.close()
    factory = None


app = FastAPI(
    title="Notification Service",
    description="E-mail notifications for platform events",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint"""
    dependencies = {}
    if factory:
        dependencies["nats"] = "healthy" if factory.bus.is_connected else "unhealthy"
        try:
            db_health = await factory.db.health_check()
            dependencies["postgres"] = "healthy" if db_health.get("healthy") else "unhealthy"
        except Exception:
            dependencies["postgres"] = "unhealthy"

    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        port=SERVICE_PORT,
        version=SERVICE_VERSION,
        dependencies=dependencies,
    )


def main():
    """Run the service"""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "microservices.notification_service.main:app",
        host=settings.default_host,
        port=SERVICE_PORT,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
