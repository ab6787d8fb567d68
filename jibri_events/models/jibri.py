"""
Events announcing availability and idle/busy status updates of Jibri
instances known to the conference focus.

A Jibri is an external recording/streaming worker addressed by its XMPP JID.
Two kinds of event exist:

* ``STATUS_CHANGED``: a Jibri became available, or switched between idle
  and busy. Carries the idle flag.
* ``WENT_OFFLINE``: a Jibri stopped working or disconnected. Carries no idle
  flag.

On the bus both travel as a generic :class:`Event` whose topic is one of the
constants below and whose properties use ``JIBRI_JID_KEY`` / ``IS_IDLE_KEY``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .event import Event

STATUS_CHANGED = "org/jitsi/jicofo/JIBRI/STATUS"
WENT_OFFLINE = "org/jitsi/jicofo/JIBRI/OFFLINE"

JIBRI_TOPICS = frozenset({STATUS_CHANGED, WENT_OFFLINE})

# Property keys of the generic event payload
JIBRI_JID_KEY = "jibri.status"
IS_IDLE_KEY = "jibri.is_idle"


class InvalidStateError(RuntimeError):
    """A field was read on an event kind that does not carry it."""


class JibriEventKind(str, Enum):
    """Jibri event kinds, valued by their bus topic."""

    STATUS_CHANGED = STATUS_CHANGED
    WENT_OFFLINE = WENT_OFFLINE


@dataclass(frozen=True)
class JibriEvent:
    """
    Status notification about a single Jibri instance.

    Use :func:`new_status_changed_event` or :func:`new_went_offline_event`
    rather than the constructor. ``idle`` is set if and only if ``kind`` is
    ``STATUS_CHANGED``.
    """

    kind: JibriEventKind
    instance_id: str
    idle: bool | None = None

    def __post_init__(self) -> None:
        kind = JibriEventKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if not isinstance(self.instance_id, str):
            raise ValueError(
                f"{kind.value} event needs a str instance_id, "
                f"got {type(self.instance_id).__name__}"
            )
        if kind is JibriEventKind.STATUS_CHANGED and not isinstance(self.idle, bool):
            raise ValueError(
                f"{kind.value} event requires a bool idle flag, "
                f"got {type(self.idle).__name__}"
            )
        if kind is JibriEventKind.WENT_OFFLINE and self.idle is not None:
            raise ValueError(f"{kind.value} event cannot carry an idle flag")

    @property
    def topic(self) -> str:
        """Bus topic of this event."""
        return self.kind.value

    @property
    def properties(self) -> dict[str, Any]:
        """Property bag as published on the bus."""
        props: dict[str, Any] = {JIBRI_JID_KEY: self.instance_id}
        if self.idle is not None:
            props[IS_IDLE_KEY] = self.idle
        return props

    def get_instance_id(self) -> str:
        """Get the JID of the Jibri this event was created for."""
        return self.instance_id

    def is_idle(self) -> bool:
        """
        Tell whether the Jibri is idle (True) or busy (False).

        Raises:
            InvalidStateError: if called on a WENT_OFFLINE event.
        """
        if self.idle is None:
            raise InvalidStateError(
                f"Trying to access 'is_idle' on wrong event type: {self.topic}"
            )
        return self.idle

    def to_event(self, source: str = "jibri_detector") -> Event:
        """Wrap this notification in a generic bus Event."""
        return Event(topic=self.topic, properties=self.properties, source=source)

    @classmethod
    def from_event(cls, event: Event) -> "JibriEvent":
        """
        Read a JibriEvent back from a generic bus Event.

        Raises:
            ValueError: if the event is not a Jibri event or its properties
                don't match its topic.
        """
        if not is_jibri_event(event):
            raise ValueError(f"Not a Jibri event: {event.topic}")

        instance_id = event.get_property(JIBRI_JID_KEY)
        if instance_id is None:
            raise ValueError(f"Missing {JIBRI_JID_KEY!r} in {event.topic} event")

        return cls(
            kind=JibriEventKind(event.topic),
            instance_id=instance_id,
            idle=event.get_property(IS_IDLE_KEY),
        )


def new_status_changed_event(instance_id: str, is_idle: bool) -> JibriEvent:
    """Create a STATUS_CHANGED event for the given Jibri JID."""
    return JibriEvent(
        kind=JibriEventKind.STATUS_CHANGED,
        instance_id=instance_id,
        idle=bool(is_idle),
    )


def new_went_offline_event(instance_id: str) -> JibriEvent:
    """Create a WENT_OFFLINE event for the given Jibri JID."""
    return JibriEvent(kind=JibriEventKind.WENT_OFFLINE, instance_id=instance_id)


def is_jibri_event(event: Any) -> bool:
    """
    Check whether a topic, or an event's topic, belongs to the Jibri family.

    Accepts a topic string or any object with a ``topic`` attribute. Never
    raises; anything unrecognised is simply not a Jibri event.
    """
    topic = event if isinstance(event, str) else getattr(event, "topic", None)
    return isinstance(topic, str) and topic in JIBRI_TOPICS
