"""Assemble the per-lobby snapshot clients poll for."""

from app.exceptions import UnknownLobby
from app.schemas.lobby import LobbyView
from app.store.base import StateStore


async def build_view(store: StateStore, lobby_id: str) -> LobbyView:
    """
    Return the messages and senders of ``lobby_id``.

    Messages and senders are read separately, so a write racing with this
    call may or may not show up. Raises ``UnknownLobby`` for a missing lobby.
    """
    if not await store.lobby_exists(lobby_id):
        raise UnknownLobby(lobby_id)

    messages = await store.messages_for(lobby_id)
    senders = await store.senders_for(lobby_id)
    return LobbyView(id=lobby_id, messages=messages, senders=senders)
