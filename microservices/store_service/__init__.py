"""
Store Service

Store (warehouse) classification and the events raised when a store is
activated for a campaign or when an actor starts or stops occupying it.
"""

__version__ = "1.0.0"
__service__ = "store_service"
