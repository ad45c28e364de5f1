"""
NATS JetStream event bus

Publishes ``DomainEvent.to_wire()`` as JSON on the subject equal to the event
type. All event subjects are captured by one stream; each subscriber gets a
durable push consumer with explicit acknowledgement.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Union

import nats
from nats.aio.client import Client as NATSClient
from nats.js import JetStreamContext

from core.config.infra_config import InfraConfig
from core.event_bus import EventHandler, subject_for
from core.events import DomainEvent, EventType

logger = logging.getLogger(__name__)

EventDecoder = Callable[[Dict[str, Any]], Any]


def stream_subjects() -> List[str]:
    """One wildcard per aggregate prefix (``actor.>``, ``campaign.>`` ...)"""
    return sorted({f"{event_type.value.split('.')[0]}.>" for event_type in EventType})


class NATSEventBus:
    """
    NATS JetStream event bus using nats-py.

    ``decoder`` turns the received wire dict into the object handed to
    subscribers (normally the notification union's ``parse_event``). A message
    that cannot be decoded is terminated; one whose handler raises is nak'ed
    for redelivery.
    """

    def __init__(
        self,
        service_name: str,
        servers: str,
        stream_name: str = "ONCC_EVENTS",
        decoder: Optional[EventDecoder] = None,
    ):
        self.service_name = service_name
        self.servers = servers
        self.stream_name = stream_name
        self.decoder = decoder

        self._nc: Optional[NATSClient] = None
        self._js: Optional[JetStreamContext] = None
        self._subscriptions: List[Any] = []

        logger.info(f"NATS EventBus initialized: {self.servers}")

    @classmethod
    def from_config(
        cls, service_name: str, config: InfraConfig, decoder: Optional[EventDecoder] = None
    ) -> "NATSEventBus":
        return cls(
            service_name=service_name,
            servers=config.resolved_nats_url,
            stream_name=config.nats_stream,
            decoder=decoder,
        )

    @property
    def is_connected(self) -> bool:
        return self._nc is not None and self._nc.is_connected

    async def connect(self):
        """Connect and make sure the event stream exists"""
        try:
            self._nc = await nats.connect(servers=[self.servers], name=self.service_name)
            self._js = self._nc.jetstream()
            logger.info(f"Connected to NATS as {self.service_name}")
        except Exception as e:
            logger.error(f"Failed to connect to NATS: {e}")
            raise

        try:
            await self._js.add_stream(name=self.stream_name, subjects=stream_subjects())
        except Exception as e:
            # Stream already exists with a different config
            logger.debug(f"Stream creation note: {e}")

    async def publish(self, event: DomainEvent) -> bool:
        if not self._js:
            logger.error("Not connected to NATS")
            return False

        try:
            data = json.dumps(event.to_wire()).encode()
            ack = await self._js.publish(event.type, data, headers={"Nats-Msg-Id": event.id})
            logger.info(f"Published event {event.type} [{event.id}] to stream {ack.stream}, seq={ack.seq}")
            return True
        except Exception as e:
            logger.error(f"Error publishing event {event.id}: {e}")
            return False

    def decode(self, data: bytes) -> Any:
        raw = json.loads(data.decode())
        return self.decoder(raw) if self.decoder else raw

    async def subscribe(
        self,
        event_type: Union[EventType, str],
        handler: EventHandler,
        durable: Optional[str] = None,
    ) -> None:
        if not self._js:
            raise RuntimeError("Not connected to NATS")

        subject = subject_for(event_type)
        # Durable names may not contain '.'
        durable = durable or f"{self.service_name}-{subject.replace('.', '-')}"

        async def on_message(msg):
            try:
                event = self.decode(msg.data)
            except Exception as e:
                logger.error(f"Dropping undecodable message on {msg.subject}: {e}")
                await msg.term()
                return

            try:
                await handler(event)
            except Exception as e:
                logger.error(f"Error processing message on {msg.subject}: {e}")
                await msg.nak()
                return

            await msg.ack()

        sub = await self._js.subscribe(subject, durable=durable, cb=on_message, manual_ack=True)
        self._subscriptions.append(sub)
        logger.info(f"Subscribed to {subject} (JetStream consumer {durable})")

    async def close(self):
        for sub in self._subscriptions:
            try:
                await sub.unsubscribe()
            except Exception as e:
                logger.warning(f"Error unsubscribing: {e}")
        self._subscriptions.clear()

        if self._nc is not None:
            await self._nc.drain()
            self._nc = None
            self._js = None
            logger.info("NATS connection closed")
