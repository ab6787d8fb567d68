"""Tests for Application."""

import pytest

from jibri_events.app import Application
from jibri_events.event_bus import subscribe_jibri_events
from jibri_events.models import (
    STATUS_CHANGED,
    WENT_OFFLINE,
    JibriEvent,
    new_status_changed_event,
    new_went_offline_event,
)


class TestApplicationStart:
    """Tests for Application.start()."""

    async def test_start_initializes_components(self):
        """Test that start initializes all components."""
        app = Application(db_path=":memory:")
        await app.start()

        assert app._storage is not None
        assert app._event_bus is not None
        assert app._event_bus._storage is app._storage

        await app.stop()

    async def test_start_creates_database_tables(self, application):
        """Test that start creates database tables."""
        async with application._storage._conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table'"
        ) as cursor:
            tables = [row[0] for row in await cursor.fetchall()]
            assert "events" in tables

    async def test_database_url_env(self, monkeypatch, tmp_path):
        """Test that DATABASE_URL is used when no path is given."""
        db_path = tmp_path / "env.db"
        monkeypatch.setenv("DATABASE_URL", str(db_path))

        app = Application()
        await app.start()
        await app.stop()

        assert db_path.exists()


class TestApplicationNotStarted:
    """Tests for access before start()."""

    def test_storage_not_started(self):
        """Test storage property before start."""
        app = Application(db_path=":memory:")
        with pytest.raises(RuntimeError, match="Application not started"):
            _ = app.storage

    def test_event_bus_not_started(self):
        """Test event_bus property before start."""
        app = Application(db_path=":memory:")
        with pytest.raises(RuntimeError, match="Application not started"):
            _ = app.event_bus

    async def test_properties_after_stop(self):
        """Test that stop releases components."""
        app = Application(db_path=":memory:")
        await app.start()
        await app.stop()
        with pytest.raises(RuntimeError):
            _ = app.storage


class TestApplicationPublish:
    """Tests for publishing Jibri events through the Application."""

    async def test_publish_jibri_event(self, application):
        """Test that published events reach subscribers and the journal."""
        received: list[JibriEvent] = []

        async def handler(event: JibriEvent):
            received.append(event)

        subscribe_jibri_events(application.event_bus, handler)

        status = new_status_changed_event("jibri1@example.com", True)
        offline = new_went_offline_event("jibri1@example.com")
        bus_event = await application.publish_jibri_event(status)
        await application.publish_jibri_event(offline)

        assert bus_event.topic == STATUS_CHANGED
        assert received == [status, offline]

        events = await application.storage.get_events()
        assert {e.topic for e in events} == {STATUS_CHANGED, WENT_OFFLINE}

    async def test_reset_clears_journal(self, application):
        """Test that reset clears stored events."""
        await application.publish_jibri_event(new_went_offline_event("j@x"))
        await application.reset()

        assert await application.storage.get_events() == []
