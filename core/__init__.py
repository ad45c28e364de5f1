"""
Core Module for the ONCC platform services

Shared infrastructure used by every microservice.

COMPONENTS:
    - config/: environment-driven settings (infra, logging, e-mail, storage, platform)
    - logger.py: logging setup from LoggingConfig
    - errors.py: PlatformError hierarchy rendered by the HTTP layers
    - events.py: DomainEvent envelope and the EventType catalogue
    - event_bus.py: bus protocol, in-process bus and publisher base
    - nats_client.py: NATS JetStream event bus
    - postgres_client.py: asyncpg pool wrapper

USAGE:
    from core.config import load_settings
    from core.logger import setup_from_config

    settings = load_settings()
    setup_from_config(settings.logging, "notification_service")
"""

__version__ = "1.0.0"
