"""Shared test fixtures: per-test SQLite store + in-process HTTP client.

Invariants:
    - Every test gets a fresh SQLite file under tmp_path (schema already created)
    - get_item_store is overridden, so the app lifespan is not needed for route tests
    - RecordingStore counts store calls and can simulate a store outage

Design Decisions:
    - File-backed SQLite over :memory: so every pooled connection sees the same data
    - httpx ASGITransport drives the app in-process, no socket
"""

import os
from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient

# Never touch a developer's database.db from the test suite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

from items_api.api.dependencies import get_item_store  # noqa: E402
from items_api.core.errors import DatabaseError  # noqa: E402
from items_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from items_api.infrastructure.item_store import SqlItemStore  # noqa: E402
from items_api.main import app  # noqa: E402


class RecordingStore:
    """ItemRepository double: records every call, optionally fails them all."""

    def __init__(self, fail: bool = False):
        self.calls: list[tuple] = []
        self.fail = fail

    def _record(self, operation: str, *args) -> None:
        self.calls.append((operation, *args))
        if self.fail:
            raise DatabaseError(operation, "simulated outage")

    async def list_all(self):
        self._record("list_all")
        return []

    async def get_by_id(self, item_id):
        self._record("get_by_id", item_id)
        return None

    async def insert(self, name):
        self._record("insert", name)
        return 1

    async def update_by_id(self, item_id, name):
        self._record("update_by_id", item_id, name)
        return 1

    async def delete_by_id(self, item_id):
        self._record("delete_by_id", item_id)
        return 1


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'items.db'}",
    )
    yield manager
    await manager.dispose()


@pytest.fixture
async def item_store(db_manager):
    store = SqlItemStore(db_manager)
    await store.create_schema()
    return store


@pytest.fixture
def client_for():
    """Open an HTTP client against `app` with the given store injected."""
    @asynccontextmanager
    async def _client_for(store):
        app.dependency_overrides[get_item_store] = lambda: store
        try:
            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test",
            ) as c:
                yield c
        finally:
            app.dependency_overrides.clear()

    return _client_for


@pytest.fixture
async def client(item_store, client_for):
    """HTTP client backed by a real SqlItemStore."""
    async with client_for(item_store) as c:
        yield c


@pytest.fixture
def recording_store():
    return RecordingStore()


@pytest.fixture
async def recording_client(recording_store, client_for):
    """HTTP client backed by a RecordingStore (for "no store call" checks)."""
    async with client_for(recording_store) as c:
        yield c


@pytest.fixture
async def failing_client(client_for):
    """HTTP client whose store fails every operation."""
    async with client_for(RecordingStore(fail=True)) as c:
        yield c
