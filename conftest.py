"""Shared fixtures: each test gets a fresh store of every backing."""

from contextlib import asynccontextmanager

import pytest

from app.store import MemoryStateStore, SqlStateStore


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(params=["memory", "sql"])
def open_store(request, tmp_path, clock):
    """Return an async context manager yielding an initialised, empty store."""

    @asynccontextmanager
    async def _open():
        if request.param == "memory":
            store = MemoryStateStore(clock=clock)
        else:
            store = SqlStateStore.from_url(f"sqlite+aiosqlite:///{tmp_path / 'chat.db'}", clock=clock)
        await store.init()
        try:
            yield store
        finally:
            await store.close()

    return _open
