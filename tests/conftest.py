"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest_asyncio.fixture
async def storage():
    """Create in-memory storage for testing."""
    from jibri_events.storage import Storage

    st = Storage(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def event_bus(storage):
    """Create EventBus with storage."""
    from jibri_events.event_bus import EventBus

    return EventBus(storage)


@pytest_asyncio.fixture
async def application():
    """Create and start an Application with an in-memory journal."""
    from jibri_events.app import Application

    app = Application(db_path=":memory:")
    await app.start()
    yield app
    await app.stop()
