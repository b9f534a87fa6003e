"""Lobby Pydantic schemas — stored records, the lobby view, and request bodies.

JSON field names are set through aliases so the wire format stays
independent of the Python attribute names. Both are accepted on input.
"""

from typing import List

from pydantic import BaseModel, Field


class MessageOut(BaseModel):
    """A posted chat message. Immutable once stored."""
    id: int = Field(alias="messageId")
    lobby_id: str = Field(alias="lobbyId")
    sender_name: str = Field(alias="senderName")
    body: str = Field(alias="messageContent")
    timestamp: int

    model_config = {"populate_by_name": True, "from_attributes": True, "frozen": True}


class SenderOut(BaseModel):
    """A participant of a lobby."""
    name: str
    lobby_id: str = Field(alias="lobbyId")
    is_typing: bool = Field(default=False, alias="isTyping")

    model_config = {"populate_by_name": True, "from_attributes": True}


class LobbyView(BaseModel):
    """Everything a client polls for: the lobby's messages and senders."""
    id: str
    messages: List[MessageOut] = []
    senders: List[SenderOut] = []

    model_config = {"populate_by_name": True}


class PostMessageRequest(BaseModel):
    lobby_id: str = Field(alias="lobbyId")
    sender_name: str = Field(alias="senderName")
    body: str = Field(alias="messageContent")

    model_config = {"populate_by_name": True}


class EnterLobbyRequest(BaseModel):
    lobby_id: str = Field(alias="lobbyId")
    name: str

    model_config = {"populate_by_name": True}


class TypingUpdateRequest(BaseModel):
    lobby_id: str = Field(alias="lobbyId")
    name: str
    is_typing: bool = Field(alias="isTyping")

    model_config = {"populate_by_name": True}
