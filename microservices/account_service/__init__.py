"""
Account Service

User account lifecycle events (activation, deactivation, actor manager
onboarding).
"""

__version__ = "1.0.0"
__service__ = "account_service"
