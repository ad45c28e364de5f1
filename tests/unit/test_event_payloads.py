"""
Unit Tests for event payloads and the event envelope

Attributes are snake_case, the wire form is camelCase and absent optionals
are omitted.
"""

import pytest
from pydantic import ValidationError

from core.errors import ShapeError
from core.events import DomainEvent, EventType
from microservices.account_service.events.models import (
    AccountDeactivatedEvent,
    AccountDeactivatedPayload,
    ActorInfo,
)
from microservices.actor_service.events.models import (
    BuyerAddedToExporterPayload,
    BuyerAssignedAsMandataireEvent,
    BuyerAssignedAsMandatairePayload,
)
from microservices.campaign_service.events.models import CampaignAggregate, ConventionsData
from microservices.notification_service.events import NOTIFICATION_EVENTS, parse_event
from microservices.store_service.constants import StoreType
from microservices.store_service.events.models import StoreDetails, StoreRef


class TestPayloadWireForm:
    def test_camel_case_keys(self):
        payload = BuyerAddedToExporterPayload(
            exporter_id="exp-1", exporter_name="SACO", buyer_id="buy-9", buyer_name="Kouassi Négoce"
        )

        assert payload.to_wire() == {
            "exporterId": "exp-1",
            "exporterName": "SACO",
            "buyerId": "buy-9",
            "buyerName": "Kouassi Négoce",
        }

    def test_accepts_wire_names(self):
        payload = BuyerAddedToExporterPayload.model_validate(
            {"exporterId": "exp-1", "exporterName": "SACO", "buyerId": "buy-9", "buyerName": "K"}
        )

        assert payload.exporter_id == "exp-1"

    def test_absent_optionals_are_omitted(self):
        payload = AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa Koné")

        assert "reason" not in payload.to_wire()

    def test_blank_optional_is_absent(self):
        payload = AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa Koné", reason="")

        assert payload.reason is None
        assert "reason" not in payload.to_wire()
        assert StoreRef(id="s-1", name="Magasin", code="").code is None

    def test_blank_required_string_is_kept(self):
        assert ActorInfo(name="", type="EXPORTER").name == ""

    def test_store_type_serialized_as_value(self):
        store = StoreDetails(id="s-1", name="Magasin", store_type=StoreType.GROUPING)

        assert store.to_wire() == {"id": "s-1", "name": "Magasin", "storeType": "GROUPING"}

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa", motive="x")

    def test_payloads_are_frozen(self):
        payload = AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa Koné")

        with pytest.raises(ValidationError):
            payload.user_name = "Someone else"

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            BuyerAssignedAsMandatairePayload(buyer_id="buy-9", buyer_name="K", exporter_id="exp-1")


class TestCampaignShapes:
    def test_aggregate_keeps_unknown_attributes(self):
        campaign = CampaignAggregate.model_validate(
            {"id": "c-1", "code": "2025-2026", "status": "active", "startDate": "2025-10-01"}
        )

        assert campaign.to_wire()["status"] == "active"
        assert campaign.to_wire()["startDate"] == "2025-10-01"

    def test_conventions_counts_must_add_up(self):
        with pytest.raises(ValidationError):
            ConventionsData(total_conventions=3, active_conventions=1, inactive_conventions=1)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            ConventionsData(total_conventions=0, active_conventions=1, inactive_conventions=-1)


class TestEnvelope:
    def test_variant_fixes_type_and_source(self):
        event = AccountDeactivatedEvent(
            data=AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa", reason="Départ")
        )

        assert event.type == "user.account-deactivated"
        assert event.event_type is EventType.ACCOUNT_DEACTIVATED
        assert event.source == "account_service"
        assert event.version == "1.0.0"

    def test_to_wire(self):
        event = BuyerAssignedAsMandataireEvent(
            id="evt-1",
            data=BuyerAssignedAsMandatairePayload(
                buyer_id="buy-9", buyer_name="K", exporter_id="exp-1", exporter_name="SACO"
            ),
        )

        wire = event.to_wire()

        assert wire["id"] == "evt-1"
        assert wire["type"] == "actor.buyer-assigned-as-mandataire"
        assert wire["data"]["buyerId"] == "buy-9"
        assert isinstance(wire["timestamp"], str)
        assert wire["metadata"] == {}

    def test_variant_rejects_other_type(self):
        with pytest.raises(ValidationError):
            AccountDeactivatedEvent(
                type="user.account-activated",
                data=AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa"),
            )

    def test_every_event_type_has_one_variant(self):
        types = [variant.model_fields["type"].default for variant in NOTIFICATION_EVENTS]

        assert sorted(types) == sorted(t.value for t in EventType)
        assert all(issubclass(variant, DomainEvent) for variant in NOTIFICATION_EVENTS)


class TestParseEvent:
    def test_parses_matching_variant(self):
        event = AccountDeactivatedEvent(
            data=AccountDeactivatedPayload(email="awa@oncc.ci", user_name="Awa", reason="Départ")
        )

        parsed = parse_event(event.to_wire())

        assert isinstance(parsed, AccountDeactivatedEvent)
        assert parsed == event

    def test_unknown_type_is_shape_error(self):
        with pytest.raises(ShapeError):
            parse_event({"type": "user.deleted", "source": "x", "data": {}})

    def test_bad_payload_is_shape_error(self):
        with pytest.raises(ShapeError) as exc_info:
            parse_event({
                "type": "user.account-activated",
                "source": "account_service",
                "data": {"email": "awa@oncc.ci"},
            })

        assert any("userName" in e.field for e in exc_info.value.errors)


CAMPAIGN = {"id": "c-1", "code": "2025-2026", "startDate": "01/10/2025", "endDate": "30/09/2026"}
ADMIN = {"id": "u-1", "username": "admin", "fullName": "Awa Koné"}
AUDIT = {"id": "u-1", "fullName": "Awa Koné"}
BUYER_PAIR = {"buyerId": "buy-9", "buyerName": "K", "exporterId": "exp-1", "exporterName": "SACO"}
OPA_PAIR = {"opaId": "opa-1", "opaName": "COOP CA", "producerId": "prod-1", "producerName": "Konan Yao"}
ACTOR = {"actorId": "opa-1", "actorName": "COOP CA", "actorType": "PRODUCERS"}
STORE = {"id": "s-1", "name": "Magasin"}
OCCUPANT = {"id": "exp-1", "fullName": "SACO", "actorType": "EXPORTER"}
CONVENTION = {"id": "conv-1", "code": "CONV-2025-001", "signatureDate": "15/09/2025"}
PARTIES = {"buyerExporter": OCCUPANT, "producers": {"id": "opa-1", "fullName": "COOP CA"}}
COUNTS = {"totalConventions": 0, "activeConventions": 0, "inactiveConventions": 0}

# Smallest valid wire payload of every notification event, optionals left out
MINIMAL_PAYLOADS = {
    "BuyerAddedToExporterPayload": BUYER_PAIR,
    "BuyerRemovedFromExporterPayload": BUYER_PAIR,
    "BuyerAssignedAsMandatairePayload": BUYER_PAIR,
    "BuyerUnassignedAsMandatairePayload": BUYER_PAIR,
    "ProducerAddedToOpaPayload": OPA_PAIR,
    "ProducerRemovedFromOpaPayload": OPA_PAIR,
    "ActorActivatedPayload": ACTOR,
    "ActorDeactivatedPayload": ACTOR,
    "CampaignActivatedPayload": {"campaign": {"id": "c-1", "code": "2025-2026"}, "activatedBy": ADMIN},
    "OpaConventionsStatusPayload": {
        "campaign": CAMPAIGN, "opa": {"id": "opa-1", "fullName": "COOP CA"},
        "conventionsData": COUNTS, "activatedBy": AUDIT,
    },
    "BuyerConventionsStatusPayload": {
        "campaign": CAMPAIGN, "buyer": OCCUPANT, "conventionsData": COUNTS, "activatedBy": AUDIT,
    },
    "StoresStatusPayload": {
        "campaign": CAMPAIGN, "totalStores": 0, "activeStores": 0, "inactiveStores": 0, "activatedBy": AUDIT,
    },
    "ConventionCreatedPayload": {**PARTIES, "convention": {**CONVENTION, "products": []}, "createdBy": AUDIT},
    "ConventionUpdatedPayload": {
        **PARTIES,
        "convention": {**CONVENTION, "products": []},
        "changes": {"signatureDateChanged": False, "productsChanged": False},
        "updatedBy": AUDIT,
    },
    "ConventionAssociatedToCampaignPayload": {
        **PARTIES, "convention": CONVENTION, "campaign": CAMPAIGN, "associatedBy": AUDIT,
    },
    "ConventionDissociatedFromCampaignPayload": {
        **PARTIES, "convention": CONVENTION, "campaign": CAMPAIGN, "dissociatedBy": AUDIT,
    },
    "OccupantAssignedPayload": {"store": STORE, "actor": OCCUPANT, "assignedBy": ADMIN},
    "OccupantUnassignedPayload": {"store": STORE, "actor": OCCUPANT, "unassignedBy": ADMIN},
    "StoreActivatedPayload": {"store": STORE, "campaign": CAMPAIGN, "activatedBy": ADMIN},
    "StoreDeactivatedPayload": {"store": STORE, "campaign": CAMPAIGN, "deactivatedBy": ADMIN},
    "AccountActivatedPayload": {"email": "awa@oncc.ci", "userName": "Awa"},
    "AccountDeactivatedPayload": {"email": "awa@oncc.ci", "userName": "Awa"},
    "ActorManagerWelcomePayload": {
        "email": "jean@saco.ci", "userName": "Jean", "username": "jkouame",
        "tempPassword": "Tmp#2025", "actorInfo": {"name": "SACO", "type": "EXPORTER"},
    },
}

PAYLOAD_CLASSES = [variant.model_fields["data"].annotation for variant in NOTIFICATION_EVENTS]

REQUIRED_FIELDS = [
    pytest.param(cls, field.alias or name, id=f"{cls.__name__}.{name}")
    for cls in PAYLOAD_CLASSES
    for name, field in cls.model_fields.items()
    if field.is_required()
]


class TestEveryPayload:
    def test_every_payload_has_a_minimal_sample(self):
        assert sorted(MINIMAL_PAYLOADS) == sorted(cls.__name__ for cls in PAYLOAD_CLASSES)

    @pytest.mark.parametrize("cls", PAYLOAD_CLASSES, ids=lambda cls: cls.__name__)
    def test_minimal_payload_validates(self, cls):
        payload = cls.model_validate(MINIMAL_PAYLOADS[cls.__name__])

        assert payload.to_wire() == MINIMAL_PAYLOADS[cls.__name__]

    @pytest.mark.parametrize("cls, wire_name", REQUIRED_FIELDS)
    def test_dropping_a_required_field_fails(self, cls, wire_name):
        sample = dict(MINIMAL_PAYLOADS[cls.__name__])
        del sample[wire_name]

        with pytest.raises(ValidationError):
            cls.model_validate(sample)
