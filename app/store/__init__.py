"""
Lobby Chat – state store backings.

``build_store`` picks the backing named by ``STORE_BACKEND``.
"""

from app.config import Settings
from app.store.base import StateStore, StoreLocks          # noqa: F401
from app.store.memory import MemoryStateStore             # noqa: F401
from app.store.sql import SqlStateStore                   # noqa: F401


def build_store(settings: Settings) -> StateStore:
    if settings.STORE_BACKEND == "memory":
        return MemoryStateStore()
    return SqlStateStore.from_url(settings.DATABASE_URL, echo=settings.DEBUG)
