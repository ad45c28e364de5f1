"""
Events consumed by the Notification Service
"""

from .handlers import NotificationEventHandler
from .models import NOTIFICATION_EVENTS, NotificationEvent, parse_event

__all__ = [
    "NotificationEventHandler",
    "NOTIFICATION_EVENTS",
    "NotificationEvent",
    "parse_event",
]
