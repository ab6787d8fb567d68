"""Generic event exchanged through the EventBus."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Event:
    """An immutable bus event: a topic plus an opaque property bag."""

    topic: str
    properties: Mapping[str, Any] = field(default_factory=dict)
    source: str = "unknown"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict don't leak in
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties))
        )

    def get_property(self, key: str, default: Any = None) -> Any:
        """Get a property value, or default if the key is absent."""
        return self.properties.get(key, default)
