"""SQLite event journal."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

import aiosqlite

from ..config import resolve_db_path
from ..models import Event


class IStorage(Protocol):
    """Persistent journal of published bus events (SQLite)."""

    async def init(self) -> None:
        """Initialize database and create tables."""
        ...

    async def close(self) -> None:
        """Close database connection."""
        ...

    async def save_event(self, event: Event) -> None:
        """Save a published event; ids already journaled are skipped."""
        ...

    async def get_events(
        self,
        topic: str | None = None,
        after: datetime | None = None,
        limit: int = 100,
    ) -> list[Event]:
        """Get events (newest first) with optional filters."""
        ...

    async def clear(self) -> None:
        """Clear all data."""
        ...


class Storage:
    """SQLite storage implementation."""

    def __init__(self, db_path: str | Path | None = None):
        self._db_path = resolve_db_path(db_path)
        self._conn: aiosqlite.Connection | None = None

    async def init(self) -> None:
        """Initialize database and create tables."""
        self._conn = await aiosqlite.connect(self._db_path)

        schema_path = Path(__file__).parent / "schema.sql"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema_sql = f.read()
        await self._conn.executescript(schema_sql)
        await self._conn.commit()

    async def close(self) -> None:
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def save_event(self, event: Event) -> None:
        """Save a published event. Re-saving an already journaled id is a no-op."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        await self._conn.execute(
            """
            INSERT OR IGNORE INTO events (id, topic, properties, source, timestamp)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                event.id,
                event.topic,
                json.dumps(dict(event.properties)),
                event.source,
                _to_utc(event.timestamp).isoformat(),
            ),
        )
        await self._conn.commit()

    async def get_events(
        self,
        topic: str | None = None,
        after: datetime | None = None,
        limit: int = 100,
    ) -> list[Event]:
        """Get events (newest first) with optional filters."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        query = "SELECT id, topic, properties, source, timestamp FROM events WHERE 1=1"
        params: list = []

        if topic:
            query += " AND topic = ?"
            params.append(topic)

        if after:
            query += " AND timestamp > ?"
            params.append(_to_utc(after).isoformat())

        query += " ORDER BY timestamp DESC, rowid DESC LIMIT ?"
        params.append(limit)

        cursor = await self._conn.execute(query, params)
        rows = await cursor.fetchall()

        return [
            Event(
                id=row[0],
                topic=row[1],
                properties=json.loads(row[2]),
                source=row[3],
                timestamp=datetime.fromisoformat(row[4]),
            )
            for row in rows
        ]

    async def clear(self) -> None:
        """Clear all data."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        await self._conn.execute("DELETE FROM events")
        await self._conn.commit()


def _to_utc(ts: datetime) -> datetime:
    # Naive timestamps are taken as UTC so ISO strings sort consistently
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)
