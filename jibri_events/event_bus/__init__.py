"""EventBus module."""

from .event_bus import (
    EventBus,
    IEventBus,
    JibriEventHandler,
    TopicHandler,
    subscribe_jibri_events,
)

__all__ = [
    "EventBus",
    "IEventBus",
    "JibriEventHandler",
    "TopicHandler",
    "subscribe_jibri_events",
]
