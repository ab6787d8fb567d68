"""Observability API routes."""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Query

from ...app import IApplication
from .jibri import EventResponse, event_to_dict


def create_observability_router(app: IApplication) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/events", response_model=list[EventResponse])
    async def get_events(
        topic: str | None = Query(None, description="Filter by topic"),
        after: str | None = Query(None, description="ISO timestamp filter"),
        limit: int = Query(100, ge=1, le=1000),
    ) -> list[dict]:
        """Get journaled events, newest first."""
        try:
            after_dt = None
            if after:
                try:
                    after_dt = datetime.fromisoformat(after)
                except ValueError:
                    raise HTTPException(
                        status_code=400, detail="Invalid after timestamp format"
                    )

            events = await app.storage.get_events(
                topic=topic, after=after_dt, limit=limit
            )
            return [event_to_dict(e) for e in events]

        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
