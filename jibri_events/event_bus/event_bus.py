"""EventBus implementation for pub/sub messaging."""

import asyncio
from collections import defaultdict
from typing import Awaitable, Callable, Protocol

from ..logging_config import get_logger
from ..models import JIBRI_TOPICS, Event, JibriEvent
from ..storage import IStorage

logger = get_logger(__name__)


TopicHandler = Callable[[Event], Awaitable[None]]
JibriEventHandler = Callable[[JibriEvent], Awaitable[None]]


class IEventBus(Protocol):
    """In-memory pub/sub for exchanging Events by topic."""

    def subscribe(self, topic: str, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        ...

    def unsubscribe(self, topic: str, handler: TopicHandler) -> None:
        """Remove a handler from a topic."""
        ...

    async def publish(self, event: Event) -> None:
        """Publish Event: calls subscriber callbacks, persists to Storage."""
        ...


class EventBus:
    """In-memory pub/sub event bus."""

    def __init__(self, storage: IStorage | None = None):
        self._storage = storage
        self._subscribers: dict[str, list[TopicHandler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: TopicHandler) -> None:
        """Subscribe a handler to a topic."""
        self._subscribers[topic].append(handler)
        logger.debug("Handler subscribed to %s", topic)

    def unsubscribe(self, topic: str, handler: TopicHandler) -> None:
        """Remove a handler from a topic."""
        handlers = self._subscribers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._subscribers[topic]

    def topics(self) -> set[str]:
        """Topics that currently have subscribers."""
        return {topic for topic, handlers in self._subscribers.items() if handlers}

    async def publish(self, event: Event) -> None:
        """Publish Event: calls subscriber callbacks, persists to Storage."""
        handlers = list(self._subscribers.get(event.topic, []))

        # Call all handlers concurrently
        if handlers:
            results = await asyncio.gather(
                *[handler(event) for handler in handlers],
                return_exceptions=True,
            )

            for i, result in enumerate(results):
                if isinstance(result, Exception):
                    logger.error(
                        "Error in handler %s for %s: %s", i, event.topic, result
                    )
        else:
            logger.debug("No subscribers for %s", event.topic)

        if self._storage is not None:
            await self._storage.save_event(event)


def subscribe_jibri_events(bus: IEventBus, handler: JibriEventHandler) -> TopicHandler:
    """
    Subscribe a JibriEvent handler to both Jibri topics.

    Generic events are converted with JibriEvent.from_event before the
    handler sees them. Returns the registered bus-level handler so the
    caller can unsubscribe it later.
    """

    async def _on_event(event: Event) -> None:
        await handler(JibriEvent.from_event(event))

    for topic in sorted(JIBRI_TOPICS):
        bus.subscribe(topic, _on_event)

    return _on_event
