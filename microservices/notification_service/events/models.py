"""
Notification event union

Every event the notification service consumes, discriminated by ``type``.
"""

from typing import Annotated, Any, Dict, NamedTuple, Union

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.errors import ShapeError

from microservices.account_service.events.models import ACCOUNT_EVENTS
from microservices.actor_service.events.models import ACTOR_EVENTS
from microservices.campaign_service.events.models import CAMPAIGN_EVENTS
from microservices.convention_service.events.models import CONVENTION_EVENTS
from microservices.store_service.events.models import STORE_EVENTS

NOTIFICATION_EVENTS = ACTOR_EVENTS + CAMPAIGN_EVENTS + CONVENTION_EVENTS + STORE_EVENTS + ACCOUNT_EVENTS

NotificationEvent = Annotated[Union[NOTIFICATION_EVENTS], Field(discriminator="type")]

_adapter: TypeAdapter = TypeAdapter(NotificationEvent)


class PayloadIssue(NamedTuple):
    field: str
    message: str
    value: Any = None


def parse_event(raw: Dict[str, Any]):
    """Wire dict -> concrete event variant; unknown type or bad payload raises ShapeError"""
    try:
        return _adapter.validate_python(raw)
    except PydanticValidationError as e:
        issues = [
            PayloadIssue(".".join(str(part) for part in err["loc"]), err["msg"], err.get("input"))
            for err in e.errors()
        ]
        raise ShapeError(f"Invalid event payload: {e.error_count()} error(s)", errors=issues)


__all__ = ["NOTIFICATION_EVENTS", "NotificationEvent", "parse_event"]
