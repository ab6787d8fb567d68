"""Application bootstrap and lifecycle management."""

import os
from typing import Protocol

from .config import resolve_db_path
from .event_bus import EventBus, IEventBus
from .logging_config import get_logger
from .models import Event, JibriEvent
from .storage import IStorage, Storage

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Clear the event journal."""
        ...

    async def publish_jibri_event(self, event: JibriEvent) -> Event:
        """Publish a JibriEvent on the bus."""
        ...

    @property
    def storage(self) -> IStorage:
        ...

    @property
    def event_bus(self) -> IEventBus:
        ...


class Application:
    """Main application bootstrap."""

    def __init__(self, db_path: str | None = None):
        env_db_path = os.getenv("DATABASE_URL") if db_path is None else db_path
        self._db_path = resolve_db_path(env_db_path)

        # Components (initialized in start())
        self._storage: IStorage | None = None
        self._event_bus: EventBus | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. Storage (no dependencies)
        self._storage = Storage(self._db_path)
        await self._storage.init()
        logger.info("Storage initialized")

        # 2. EventBus (depends on Storage for the journal)
        self._event_bus = EventBus(self._storage)
        logger.info("EventBus initialized")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._event_bus = None
        if self._storage:
            await self._storage.close()
            self._storage = None
            logger.info("Storage closed")

    async def reset(self) -> None:
        """Clear the event journal."""
        await self.storage.clear()
        logger.info("Storage cleared")

    async def publish_jibri_event(self, event: JibriEvent) -> Event:
        """Publish a JibriEvent on the bus and return the generic event sent."""
        bus_event = event.to_event()
        logger.info(
            "Publishing %s for %s",
            event.topic,
            event.instance_id,
            extra={"context": {"event_id": bus_event.id}},
        )
        await self.event_bus.publish(bus_event)
        return bus_event

    @property
    def storage(self) -> IStorage:
        """Get storage instance."""
        if not self._storage:
            raise RuntimeError("Application not started")
        return self._storage

    @property
    def event_bus(self) -> EventBus:
        """Get event bus instance."""
        if not self._event_bus:
            raise RuntimeError("Application not started")
        return self._event_bus
