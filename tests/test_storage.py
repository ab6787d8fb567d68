"""Tests for Storage."""

from datetime import datetime, timedelta, timezone

import pytest

from jibri_events.models import STATUS_CHANGED, WENT_OFFLINE, Event
from jibri_events.storage import Storage


def _event(topic: str, event_id: str, ts: datetime, **props) -> Event:
    return Event(topic=topic, properties=props, source="test", id=event_id, timestamp=ts)


class TestStorageInit:
    """Tests for Storage initialization."""

    async def test_init_creates_tables(self, storage):
        """Test that init creates the events table."""
        async with storage._conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table'"
        ) as cursor:
            tables = [row[0] for row in await cursor.fetchall()]
            assert "events" in tables

    async def test_not_initialized(self):
        """Test that use before init raises."""
        st = Storage(":memory:")
        with pytest.raises(RuntimeError, match="Storage not initialized"):
            await st.get_events()
        with pytest.raises(RuntimeError):
            await st.save_event(Event(topic="t"))

    async def test_close_twice(self):
        """Test that close is safe to repeat."""
        st = Storage(":memory:")
        await st.init()
        await st.close()
        await st.close()

    async def test_file_database(self, tmp_path):
        """Test a journal on disk survives reopening."""
        db_path = tmp_path / "journal.db"
        st = Storage(db_path)
        await st.init()
        await st.save_event(Event(topic=WENT_OFFLINE, id="evt1"))
        await st.close()

        st = Storage(db_path)
        await st.init()
        events = await st.get_events()
        await st.close()

        assert [e.id for e in events] == ["evt1"]


class TestStorageEvents:
    """Tests for event journal storage."""

    async def test_save_and_get_event(self, storage):
        """Test saving and reading back an event."""
        ts = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        event = Event(
            topic=STATUS_CHANGED,
            properties={"jibri.status": "jibri1@example.com", "jibri.is_idle": True},
            source="jibri_detector",
            id="evt1",
            timestamp=ts,
        )
        await storage.save_event(event)

        events = await storage.get_events()
        assert len(events) == 1
        assert events[0].id == "evt1"
        assert events[0].topic == STATUS_CHANGED
        assert events[0].properties == {
            "jibri.status": "jibri1@example.com",
            "jibri.is_idle": True,
        }
        assert events[0].source == "jibri_detector"
        assert events[0].timestamp == ts

    async def test_newest_first(self, storage):
        """Test events are returned newest first."""
        base = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        for i in range(3):
            await storage.save_event(_event(STATUS_CHANGED, f"evt{i}", base + timedelta(seconds=i)))

        events = await storage.get_events()
        assert [e.id for e in events] == ["evt2", "evt1", "evt0"]

    async def test_filter_by_topic(self, storage):
        """Test topic filter."""
        ts = datetime.now(timezone.utc)
        await storage.save_event(_event(STATUS_CHANGED, "evt1", ts))
        await storage.save_event(_event(WENT_OFFLINE, "evt2", ts))

        events = await storage.get_events(topic=WENT_OFFLINE)
        assert [e.id for e in events] == ["evt2"]

    async def test_filter_after(self, storage):
        """Test timestamp filter."""
        base = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        await storage.save_event(_event(STATUS_CHANGED, "old", base))
        await storage.save_event(_event(STATUS_CHANGED, "new", base + timedelta(minutes=5)))

        events = await storage.get_events(after=base + timedelta(minutes=1))
        assert [e.id for e in events] == ["new"]

    async def test_limit(self, storage):
        """Test limit on returned events."""
        base = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
        for i in range(5):
            await storage.save_event(_event(WENT_OFFLINE, f"evt{i}", base + timedelta(seconds=i)))

        events = await storage.get_events(limit=2)
        assert [e.id for e in events] == ["evt4", "evt3"]

    async def test_clear(self, storage):
        """Test clearing the journal."""
        await storage.save_event(Event(topic=WENT_OFFLINE))
        await storage.clear()
        assert await storage.get_events() == []

    async def test_save_same_id_twice(self, storage):
        """Test that saving an already journaled id keeps the first row."""
        event = Event(topic=WENT_OFFLINE, id="evt1")
        await storage.save_event(event)
        await storage.save_event(event)

        events = await storage.get_events()
        assert [e.id for e in events] == ["evt1"]
