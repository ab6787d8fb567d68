"""Core data models for the Jibri event service."""

from .event import Event
from .jibri import (
    IS_IDLE_KEY,
    JIBRI_JID_KEY,
    JIBRI_TOPICS,
    STATUS_CHANGED,
    WENT_OFFLINE,
    InvalidStateError,
    JibriEvent,
    JibriEventKind,
    is_jibri_event,
    new_status_changed_event,
    new_went_offline_event,
)

__all__ = [
    # Generic bus event
    "Event",
    # Jibri events
    "JibriEvent",
    "JibriEventKind",
    "InvalidStateError",
    "new_status_changed_event",
    "new_went_offline_event",
    "is_jibri_event",
    # Wire constants
    "STATUS_CHANGED",
    "WENT_OFFLINE",
    "JIBRI_TOPICS",
    "JIBRI_JID_KEY",
    "IS_IDLE_KEY",
]
