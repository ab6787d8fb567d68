"""Jibri status events and the bus they travel on."""

from .app import Application, IApplication
from .event_bus import EventBus, IEventBus, subscribe_jibri_events
from .models import (
    IS_IDLE_KEY,
    JIBRI_JID_KEY,
    JIBRI_TOPICS,
    STATUS_CHANGED,
    WENT_OFFLINE,
    Event,
    InvalidStateError,
    JibriEvent,
    JibriEventKind,
    is_jibri_event,
    new_status_changed_event,
    new_went_offline_event,
)
from .storage import IStorage, Storage

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Event",
    "JibriEvent",
    "JibriEventKind",
    "InvalidStateError",
    "new_status_changed_event",
    "new_went_offline_event",
    "is_jibri_event",
    "STATUS_CHANGED",
    "WENT_OFFLINE",
    "JIBRI_TOPICS",
    "JIBRI_JID_KEY",
    "IS_IDLE_KEY",
    # Components
    "IStorage",
    "Storage",
    "IEventBus",
    "EventBus",
    "subscribe_jibri_events",
]
