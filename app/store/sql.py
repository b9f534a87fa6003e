"""Relational state store on the async SQLAlchemy ORM.

Each operation runs in its own session and transaction, so a check and the
write that depends on it commit together or not at all.
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.database import Base, make_engine, make_session_factory
from app.exceptions import LobbyAlreadyExists, UnknownLobby
from app.models import Lobby, Message, Sender
from app.schemas.lobby import MessageOut, SenderOut
from app.store.base import StateStore


def _message_out(row: Message) -> MessageOut:
    return MessageOut(
        id=row.id,
        lobby_id=row.lobby_id,
        sender_name=row.sender_name,
        body=row.body,
        timestamp=row.timestamp,
    )


def _sender_out(row: Sender) -> SenderOut:
    return SenderOut(name=row.name, lobby_id=row.lobby_id, is_typing=row.is_typing)


class SqlStateStore(StateStore):
    """State kept in the ``lobbies``, ``messages`` and ``senders`` tables."""

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        clock: Callable[[], float] = time.time,
    ):
        super().__init__(clock)
        self.engine = engine
        self._sessions = session_factory or make_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False, **kwargs) -> "SqlStateStore":
        return cls(make_engine(database_url, echo=echo), **kwargs)

    async def init(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    @staticmethod
    async def _has_lobby(session: AsyncSession, lobby_id: str) -> bool:
        result = await session.execute(select(Lobby.id).where(Lobby.id == lobby_id))
        return result.scalar_one_or_none() is not None

    # ── Lobbies ──
    async def lobby_exists(self, lobby_id: str) -> bool:
        async with self._sessions() as session:
            return await self._has_lobby(session, lobby_id)

    async def create_lobby(self, lobby_id: str) -> None:
        async with self._sessions() as session:
            try:
                async with session.begin():
                    session.add(Lobby(id=lobby_id))
            except IntegrityError as exc:
                raise LobbyAlreadyExists(lobby_id) from exc

    # ── Messages ──
    async def append_message(self, lobby_id: str, sender_name: str, body: str) -> MessageOut:
        async with self._sessions() as session:
            async with session.begin():
                if not await self._has_lobby(session, lobby_id):
                    raise UnknownLobby(lobby_id)
                row = Message(
                    lobby_id=lobby_id,
                    sender_name=sender_name,
                    body=body,
                    timestamp=self._now(),
                )
                session.add(row)
                await session.flush()
            return _message_out(row)

    async def messages_for(self, lobby_id: str) -> List[MessageOut]:
        async with self._sessions() as session:
            result = await session.execute(
                select(Message)
                .where(Message.lobby_id == lobby_id)
                .order_by(Message.id)
            )
            return [_message_out(row) for row in result.scalars().all()]

    # ── Senders ──
    async def upsert_sender(self, lobby_id: str, name: str) -> bool:
        async with self._sessions() as session:
            try:
                async with session.begin():
                    if not await self._has_lobby(session, lobby_id):
                        raise UnknownLobby(lobby_id)
                    existing = await session.get(Sender, (name, lobby_id))
                    if existing is not None:
                        return False
                    session.add(Sender(name=name, lobby_id=lobby_id, is_typing=False))
            except IntegrityError:
                # Another writer inserted the same (name, lobby) pair first.
                return False
            return True

    async def senders_for(self, lobby_id: str) -> List[SenderOut]:
        async with self._sessions() as session:
            result = await session.execute(
                select(Sender).where(Sender.lobby_id == lobby_id)
            )
            return [_sender_out(row) for row in result.scalars().all()]

    async def set_typing(self, lobby_id: str, name: str, typing: bool) -> bool:
        async with self._sessions() as session:
            async with session.begin():
                sender = await session.get(Sender, (name, lobby_id))
                if sender is None:
                    return False
                sender.is_typing = typing
            return True
