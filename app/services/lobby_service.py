"""Lobby operations: validation, locking, and the view returned to clients."""

import random
from typing import Optional

from app.config import Settings
from app.exceptions import BodyTooLong, NameTooLong, SenderNotFound
from app.schemas.lobby import LobbyView
from app.services.lobby_ids import LOBBY_ID_LENGTH, MAX_ATTEMPTS, generate_lobby_id
from app.services.lobby_view import build_view
from app.store.base import StateStore

MAX_MESSAGE_LENGTH = 512
MAX_USERNAME_LENGTH = 32


class LobbyService:
    """
    The operations the HTTP layer exposes, over an injected ``StateStore``.

    Every write holds the lock of the collection it touches for the whole
    check-write-read sequence, so the view a writer gets back always
    contains its own write. Existence checks never take a lock.
    """

    def __init__(
        self,
        store: StateStore,
        max_message_length: int = MAX_MESSAGE_LENGTH,
        max_name_length: int = MAX_USERNAME_LENGTH,
        lobby_id_length: int = LOBBY_ID_LENGTH,
        id_attempts: int = MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.max_message_length = max_message_length
        self.max_name_length = max_name_length
        self.lobby_id_length = lobby_id_length
        self.id_attempts = id_attempts
        self._rng = rng

    @classmethod
    def from_settings(cls, store: StateStore, settings: Settings) -> "LobbyService":
        return cls(
            store,
            max_message_length=settings.MAX_MESSAGE_LENGTH,
            max_name_length=settings.MAX_USERNAME_LENGTH,
            lobby_id_length=settings.LOBBY_ID_LENGTH,
            id_attempts=settings.LOBBY_ID_ATTEMPTS,
        )

    def _check_name(self, name: str) -> None:
        if len(name) > self.max_name_length:
            raise NameTooLong(self.max_name_length)

    async def create_lobby(self) -> str:
        async with self.store.locks.lobbies:
            lobby_id = await generate_lobby_id(
                self.store.lobby_exists,
                length=self.lobby_id_length,
                attempts=self.id_attempts,
                rng=self._rng,
            )
            await self.store.create_lobby(lobby_id)
        return lobby_id

    async def lobby_exists(self, lobby_id: str) -> bool:
        return await self.store.lobby_exists(lobby_id)

    async def post_message(self, lobby_id: str, sender_name: str, body: str) -> LobbyView:
        if len(body) > self.max_message_length:
            raise BodyTooLong(self.max_message_length)
        self._check_name(sender_name)

        async with self.store.locks.messages:
            await self.store.append_message(lobby_id, sender_name, body)
            return await build_view(self.store, lobby_id)

    async def enter_lobby(self, lobby_id: str, name: str) -> LobbyView:
        self._check_name(name)

        async with self.store.locks.senders:
            await self.store.upsert_sender(lobby_id, name)
            return await build_view(self.store, lobby_id)

    async def set_typing(self, lobby_id: str, name: str, typing: bool) -> None:
        async with self.store.locks.senders:
            found = await self.store.set_typing(lobby_id, name, typing)
        if not found:
            raise SenderNotFound(lobby_id, name)

    async def fetch_view(self, lobby_id: str) -> LobbyView:
        return await build_view(self.store, lobby_id)
