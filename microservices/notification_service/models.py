"""
Notification Service - Data Models
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Recipient(BaseModel):
    """Someone a notification e-mail goes to"""
    email: str
    name: str = ""
    # Actor the recipient manages, when resolved through an actor
    actor_id: Optional[str] = None
    actor_name: Optional[str] = None


class RenderedEmail(BaseModel):
    subject: str
    html: str


class EmailMessage(BaseModel):
    to: str
    subject: str
    html: str
    text: Optional[str] = None


class NotificationResult(BaseModel):
    """Outcome of handling one event"""
    event_id: str
    event_type: str
    sent: int = 0
    failed: int = 0
    skipped: bool = False
    errors: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    service: str
    port: int
    version: str
    dependencies: Dict[str, str] = Field(default_factory=dict)
