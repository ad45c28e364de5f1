"""
Location Service

Administrative location classification (region > department > district).
"""

__version__ = "1.0.0"
__service__ = "location_service"
