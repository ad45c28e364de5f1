"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (database, event bus, e-mail).
"""

from .db_mock import MockPostgresClient
from .nats_mock import MockEventBus
from .service_mocks import (
    MockEmailClient,
    MockProductionBasinRepository,
    MockRecipientDirectory,
    MockUserLookup,
)

__all__ = [
    'MockPostgresClient',
    'MockEventBus',
    'MockEmailClient',
    'MockProductionBasinRepository',
    'MockRecipientDirectory',
    'MockUserLookup',
]
