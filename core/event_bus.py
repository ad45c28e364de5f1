"""
Event bus abstraction

``EventBusProtocol`` is what publishers and subscribers depend on. Two
implementations exist: ``InProcessEventBus`` (process-local emitter, used by
tests and single-process deployments) and ``core.nats_client.NATSEventBus``.
"""

import asyncio
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Optional, Protocol, Set, Union, runtime_checkable

from core.events import DomainEvent, EventType

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


def subject_for(event_type: Union[EventType, str]) -> str:
    return event_type.value if isinstance(event_type, EventType) else str(event_type)


@runtime_checkable
class EventBusProtocol(Protocol):
    """Interface for event bus implementations"""

    async def publish(self, event: DomainEvent) -> bool:
        """Publish an event, True once the bus accepted it"""
        ...

    async def subscribe(self, event_type: Union[EventType, str], handler: EventHandler) -> None:
        """Register an async handler for one event type"""
        ...

    async def close(self) -> None:
        ...


class InProcessEventBus:
    """
    Process-local event emitter.

    Each handler runs in its own background task so ``publish`` returns as
    soon as deliveries are scheduled. ``drain()`` waits for every pending
    delivery; a failing handler is logged and does not affect the others.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._pending: Set[asyncio.Task] = set()

    async def subscribe(self, event_type: Union[EventType, str], handler: EventHandler) -> None:
        self._handlers[subject_for(event_type)].append(handler)
        logger.debug(f"Subscribed handler to {subject_for(event_type)}")

    async def publish(self, event: DomainEvent) -> bool:
        for handler in list(self._handlers.get(event.type, [])):
            task = asyncio.create_task(self._deliver(handler, event))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
        return True

    async def _deliver(self, handler: EventHandler, event: DomainEvent):
        try:
            await handler(event)
        except Exception as e:
            logger.error(f"Handler failed for event {event.type} [{event.id}]: {e}", exc_info=True)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled delivery (including ones they schedule) finished"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        await self.drain()
        self._handlers.clear()


class EventPublisherBase:
    """
    Base for the per-aggregate publishers.

    Publishing is best-effort: the state change the event describes is
    already committed, so a bus failure is logged and reported as False.
    Payload construction errors are raised before this point and reach the
    caller.
    """

    def __init__(self, event_bus: Optional[EventBusProtocol] = None):
        self.event_bus = event_bus

    async def publish(self, event: DomainEvent) -> bool:
        if not self.event_bus:
            logger.debug(f"Event bus not configured, skipping publish: {event.type}")
            return False

        try:
            published = await self.event_bus.publish(event)
        except Exception as e:
            logger.error(f"Failed to publish event {event.type} [{event.id}]: {e}")
            return False

        if published:
            logger.debug(f"Published event: {event.type} [{event.id}]")
        else:
            logger.error(f"Event bus rejected event {event.type} [{event.id}]")
        return bool(published)
