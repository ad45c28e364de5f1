"""
Notification Service Package

Turns domain events into e-mails for the people concerned.
"""

__version__ = "1.0.0"
__service__ = "notification_service"
