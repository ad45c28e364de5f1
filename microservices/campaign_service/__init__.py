"""
Campaign Service

Events raised around the activation of a regulatory export campaign:
the activation itself and the audits of stores and conventions that are not
yet attached to the new campaign.
"""

__version__ = "1.0.0"
__service__ = "campaign_service"
