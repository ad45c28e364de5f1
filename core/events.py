"""
Domain event envelope and shared payload building blocks

Every notification travels as one tagged variant of ``DomainEvent``. The
variant classes live next to the service that raises them
(``microservices/<service>/events/models.py``); this module holds the event
type registry, the envelope base and the reference shapes several aggregates
share.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class EventType(str, Enum):
    """Event types, used verbatim as bus subjects"""

    # Actor Events
    BUYER_ADDED_TO_EXPORTER = "actor.buyer-added-to-exporter"
    BUYER_REMOVED_FROM_EXPORTER = "actor.buyer-removed-from-exporter"
    BUYER_ASSIGNED_AS_MANDATAIRE = "actor.buyer-assigned-as-mandataire"
    BUYER_UNASSIGNED_AS_MANDATAIRE = "actor.buyer-unassigned-as-mandataire"
    PRODUCER_ADDED_TO_OPA = "actor.producer-added-to-opa"
    PRODUCER_REMOVED_FROM_OPA = "actor.producer-removed-from-opa"
    ACTOR_ACTIVATED = "actor.activated"
    ACTOR_DEACTIVATED = "actor.deactivated"

    # Campaign Events
    CAMPAIGN_ACTIVATED = "campaign.activated"
    OPA_CONVENTIONS_STATUS = "campaign.opa-conventions-status"
    BUYER_CONVENTIONS_STATUS = "campaign.buyer-conventions-status"
    STORES_STATUS = "campaign.stores-status"

    # Convention Events
    CONVENTION_CREATED = "convention.created"
    CONVENTION_UPDATED = "convention.updated"
    CONVENTION_ASSOCIATED_TO_CAMPAIGN = "convention.associated-to-campaign"
    CONVENTION_DISSOCIATED_FROM_CAMPAIGN = "convention.dissociated-from-campaign"

    # Store Events
    OCCUPANT_ASSIGNED = "occupant.assigned"
    OCCUPANT_UNASSIGNED = "occupant.unassigned"
    STORE_ACTIVATED = "store.activated"
    STORE_DEACTIVATED = "store.deactivated"

    # User Events
    ACCOUNT_ACTIVATED = "user.account-activated"
    ACCOUNT_DEACTIVATED = "user.account-deactivated"
    ACTOR_MANAGER_WELCOME = "user.actor-manager-welcome"


class ServiceSource(str, Enum):
    """Services that raise events"""

    ACTOR_SERVICE = "actor_service"
    CAMPAIGN_SERVICE = "campaign_service"
    CONVENTION_SERVICE = "convention_service"
    STORE_SERVICE = "store_service"
    ACCOUNT_SERVICE = "account_service"


# Non-empty opaque identifier (a blank string is not an id)
Identifier = Annotated[str, StringConstraints(pattern=r"\S")]


class EventPayload(BaseModel):
    """
    Base for all payloads.

    Attributes are snake_case, the wire form is camelCase. Payloads are
    frozen and reject unknown fields. An optional field given "" is stored as
    None, so absent values never reach the wire as empty strings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_optional_is_absent(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields.get(info.field_name)
        if isinstance(value, str) and value == "" and field is not None and not field.is_required():
            return None
        return value

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# =============================================================================
# Shared reference shapes
# =============================================================================


class UserRef(EventPayload):
    """User who performed the action"""
    id: Identifier
    username: str
    full_name: str


class ActivatedByRef(EventPayload):
    """Actor of a campaign activation audit"""
    id: Identifier
    full_name: str


class CampaignSummary(EventPayload):
    """Campaign as shown in notifications; dates are display strings"""
    id: Identifier
    code: str
    start_date: str
    end_date: str


# =============================================================================
# Envelope
# =============================================================================


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(BaseModel):
    """
    Event envelope.

    Concrete variants narrow ``type`` to a single literal and ``data`` to
    their payload class, which makes ``type`` the discriminator.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: str
    source: str
    timestamp: datetime = Field(default_factory=_utcnow)
    data: EventPayload
    metadata: Dict[str, str] = Field(default_factory=dict)
    version: str = "1.0.0"

    @property
    def event_type(self) -> EventType:
        return EventType(self.type)

    def to_wire(self) -> Dict[str, Any]:
        """JSON-compatible dict; payload fields camelCase, absent optionals omitted"""
        wire = self.model_dump(mode="json", exclude={"data"})
        wire["data"] = self.data.to_wire()
        return wire
