"""In-memory state store.

Nothing here awaits between a check and the write that depends on it, so
each operation is atomic with respect to other tasks on the event loop.
"""

from __future__ import annotations

import itertools
import time
from typing import Callable, Dict, List, Set

from app.exceptions import LobbyAlreadyExists, UnknownLobby
from app.schemas.lobby import MessageOut, SenderOut
from app.store.base import StateStore


class MemoryStateStore(StateStore):
    """State kept in plain dicts and lists; lost when the process exits."""

    def __init__(self, clock: Callable[[], float] = time.time):
        super().__init__(clock)
        self._lobbies: Set[str] = set()
        # lobby_id -> messages in insertion order
        self._messages: Dict[str, List[MessageOut]] = {}
        # lobby_id -> name -> sender; dicts keep insertion order
        self._senders: Dict[str, Dict[str, SenderOut]] = {}
        self._message_ids = itertools.count(1)

    async def lobby_exists(self, lobby_id: str) -> bool:
        return lobby_id in self._lobbies

    async def create_lobby(self, lobby_id: str) -> None:
        if lobby_id in self._lobbies:
            raise LobbyAlreadyExists(lobby_id)
        self._lobbies.add(lobby_id)
        self._messages[lobby_id] = []
        self._senders[lobby_id] = {}

    async def append_message(self, lobby_id: str, sender_name: str, body: str) -> MessageOut:
        if lobby_id not in self._lobbies:
            raise UnknownLobby(lobby_id)
        message = MessageOut(
            id=next(self._message_ids),
            lobby_id=lobby_id,
            sender_name=sender_name,
            body=body,
            timestamp=self._now(),
        )
        self._messages[lobby_id].append(message)
        return message

    async def messages_for(self, lobby_id: str) -> List[MessageOut]:
        # Messages are frozen, so sharing the objects is safe.
        return list(self._messages.get(lobby_id, []))

    async def upsert_sender(self, lobby_id: str, name: str) -> bool:
        if lobby_id not in self._lobbies:
            raise UnknownLobby(lobby_id)
        senders = self._senders[lobby_id]
        if name in senders:
            return False
        senders[name] = SenderOut(name=name, lobby_id=lobby_id, is_typing=False)
        return True

    async def senders_for(self, lobby_id: str) -> List[SenderOut]:
        return [sender.model_copy() for sender in self._senders.get(lobby_id, {}).values()]

    async def set_typing(self, lobby_id: str, name: str, typing: bool) -> bool:
        sender = self._senders.get(lobby_id, {}).get(name)
        if sender is None:
            return False
        sender.is_typing = typing
        return True
