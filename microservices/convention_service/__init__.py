"""
Convention Service

Events raised when a buyer or exporter signs, amends, or (un)links a
purchase convention with an OPA for a campaign.
"""

__version__ = "1.0.0"
__service__ = "convention_service"
