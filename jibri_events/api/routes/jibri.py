"""Jibri status API routes."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication
from ...models import Event, new_status_changed_event, new_went_offline_event


class StatusChangedRequest(BaseModel):
    """Request model for a Jibri idle/busy update."""

    instance_id: str
    is_idle: bool


class WentOfflineRequest(BaseModel):
    """Request model for a Jibri going offline."""

    instance_id: str


class EventResponse(BaseModel):
    """Response model for a published bus event."""

    id: str
    topic: str
    properties: dict[str, Any]
    source: str
    timestamp: datetime


def event_to_dict(event: Event) -> dict:
    """Convert a bus Event to its response representation."""
    return {
        "id": event.id,
        "topic": event.topic,
        "properties": dict(event.properties),
        "source": event.source,
        "timestamp": event.timestamp.isoformat(),
    }


def create_jibri_router(app: IApplication) -> APIRouter:
    """Create Jibri router."""
    router = APIRouter(prefix="/api/jibri", tags=["jibri"])

    @router.post("/status", response_model=EventResponse)
    async def status_changed(request: StatusChangedRequest) -> dict:
        """Publish a STATUS_CHANGED event."""
        if not request.instance_id:
            raise HTTPException(status_code=400, detail="instance_id is required")
        try:
            event = new_status_changed_event(request.instance_id, request.is_idle)
            published = await app.publish_jibri_event(event)
            return event_to_dict(published)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/offline", response_model=EventResponse)
    async def went_offline(request: WentOfflineRequest) -> dict:
        """Publish a WENT_OFFLINE event."""
        if not request.instance_id:
            raise HTTPException(status_code=400, detail="instance_id is required")
        try:
            event = new_went_offline_event(request.instance_id)
            published = await app.publish_jibri_event(event)
            return event_to_dict(published)
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
