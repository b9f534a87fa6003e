"""State store contract shared by the in-memory and SQL backings."""

from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, List

from app.schemas.lobby import MessageOut, SenderOut


@dataclass
class StoreLocks:
    """One exclusive lock per entity collection.

    Callers take at most one of these at a time. Existence checks run
    without a lock.
    """
    lobbies: asyncio.Lock = field(default_factory=asyncio.Lock)
    messages: asyncio.Lock = field(default_factory=asyncio.Lock)
    senders: asyncio.Lock = field(default_factory=asyncio.Lock)


class StateStore(ABC):
    """
    Holds lobbies, messages and senders.

    Every operation is atomic on its own. Compound operations (check, write,
    then read back) are serialized by the caller through ``locks``.

    Records handed out are snapshots; later writes never change them.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.locks = StoreLocks()
        self._clock = clock

    def _now(self) -> int:
        return int(self._clock())

    async def init(self) -> None:
        """Prepare the backing storage. No-op unless overridden."""

    async def close(self) -> None:
        """Release the backing storage. No-op unless overridden."""

    async def prune(self) -> int:
        """Retention hook: evict stale lobbies and return how many went.

        Lobbies are kept forever unless a subclass overrides this.
        """
        return 0

    # ── Lobbies ──
    @abstractmethod
    async def lobby_exists(self, lobby_id: str) -> bool: ...

    @abstractmethod
    async def create_lobby(self, lobby_id: str) -> None:
        """Insert a lobby; raise ``LobbyAlreadyExists`` if the id is taken."""

    # ── Messages ──
    @abstractmethod
    async def append_message(self, lobby_id: str, sender_name: str, body: str) -> MessageOut:
        """Store a message with the next id and the current time.

        Raises ``UnknownLobby`` without writing anything if the lobby is absent.
        """

    @abstractmethod
    async def messages_for(self, lobby_id: str) -> List[MessageOut]: ...

    # ── Senders ──
    @abstractmethod
    async def upsert_sender(self, lobby_id: str, name: str) -> bool:
        """Add a sender unless (name, lobby_id) is present. Return True if added.

        An existing sender is left untouched, typing flag included.
        Raises ``UnknownLobby`` if the lobby is absent.
        """

    @abstractmethod
    async def senders_for(self, lobby_id: str) -> List[SenderOut]: ...

    @abstractmethod
    async def set_typing(self, lobby_id: str, name: str, typing: bool) -> bool:
        """Update a sender's typing flag. Return False if there is no such sender."""
