"""
Component Tests for NATSEventBus

The JetStream context is replaced by an in-memory fake, so publishing and
message acknowledgement are exercised without a server.
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from core.nats_client import NATSEventBus, stream_subjects
from microservices.account_service.events.models import AccountActivatedEvent, AccountActivatedPayload
from microservices.notification_service.events import parse_event


class FakeJetStream:
    def __init__(self, fail: bool = False):
        self.published = []
        self.subscriptions = {}
        self.fail = fail

    async def publish(self, subject, payload, headers=None):
        if self.fail:
            raise TimeoutError("no response from stream")
        self.published.append((subject, json.loads(payload), headers))
        return SimpleNamespace(stream="ONCC_EVENTS", seq=len(self.published))

    async def subscribe(self, subject, durable=None, cb=None, manual_ack=False):
        self.subscriptions[subject] = SimpleNamespace(durable=durable, cb=cb, manual_ack=manual_ack)
        return SimpleNamespace(unsubscribe=AsyncMock())


def make_message(subject: str, data: bytes):
    return SimpleNamespace(subject=subject, data=data, ack=AsyncMock(), nak=AsyncMock(), term=AsyncMock())


def make_event() -> AccountActivatedEvent:
    return AccountActivatedEvent(data=AccountActivatedPayload(email="awa@oncc.ci", user_name="Awa Koné"))


@pytest.fixture
def bus():
    bus = NATSEventBus("notification_service", "nats://localhost:4222", decoder=parse_event)
    bus._js = FakeJetStream()
    return bus


def test_stream_covers_every_aggregate():
    assert stream_subjects() == ["actor.>", "campaign.>", "occupant.>", "store.>", "user.>"]


@pytest.mark.asyncio
async def test_publish_uses_event_type_as_subject(bus):
    event = make_event()

    assert await bus.publish(event) is True

    subject, payload, headers = bus._js.published[0]
    assert subject == "user.account-activated"
    assert payload == event.to_wire()
    assert headers == {"Nats-Msg-Id": event.id}


@pytest.mark.asyncio
async def test_publish_failure_returns_false(bus):
    bus._js.fail = True

    assert await bus.publish(make_event()) is False


@pytest.mark.asyncio
async def test_publish_when_not_connected():
    bus = NATSEventBus("svc", "nats://localhost:4222")

    assert await bus.publish(make_event()) is False


@pytest.mark.asyncio
async def test_received_message_is_decoded_and_acked(bus):
    received = []

    async def handler(event):
        received.append(event)

    await bus.subscribe("user.account-activated", handler)
    sub = bus._js.subscriptions["user.account-activated"]
    assert sub.durable == "notification_service-user-account-activated"
    assert sub.manual_ack is True

    msg = make_message("user.account-activated", json.dumps(make_event().to_wire()).encode())
    await sub.cb(msg)

    assert isinstance(received[0], AccountActivatedEvent)
    msg.ack.assert_awaited_once()


@pytest.mark.asyncio
async def test_undecodable_message_is_terminated(bus):
    handler = AsyncMock()
    await bus.subscribe("user.account-activated", handler)
    sub = bus._js.subscriptions["user.account-activated"]

    msg = make_message("user.account-activated", json.dumps({"type": "user.unknown"}).encode())
    await sub.cb(msg)

    handler.assert_not_awaited()
    msg.term.assert_awaited_once()
    msg.ack.assert_not_awaited()


@pytest.mark.asyncio
async def test_handler_error_naks_for_redelivery(bus):
    handler = AsyncMock(side_effect=RuntimeError("boom"))
    await bus.subscribe("user.account-activated", handler)
    sub = bus._js.subscriptions["user.account-activated"]

    msg = make_message("user.account-activated", json.dumps(make_event().to_wire()).encode())
    await sub.cb(msg)

    msg.nak.assert_awaited_once()
    msg.ack.assert_not_awaited()


@pytest.mark.asyncio
async def test_subscribe_requires_connection():
    bus = NATSEventBus("svc", "nats://localhost:4222")

    with pytest.raises(RuntimeError):
        await bus.subscribe("user.account-activated", AsyncMock())
