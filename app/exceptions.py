"""
Lobby Chat – domain errors raised by the lobby service and state stores.

Each error carries the HTTP status the API answers with; the mapping to a
response happens in ``app.main``.
"""

from typing import Optional


class LobbyError(Exception):
    """Base class for all lobby failures."""

    status_code: int = 400
    message: str = "Lobby request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class GenerationExhausted(LobbyError):
    """No free lobby id was found within the attempt budget."""

    status_code = 500
    message = "Failed to generate unique id string!"


class LobbyAlreadyExists(LobbyError):
    status_code = 409
    message = "Lobby already exists!"

    def __init__(self, lobby_id: str):
        self.lobby_id = lobby_id
        super().__init__(f"Lobby {lobby_id!r} already exists!")


class UnknownLobby(LobbyError):
    status_code = 404
    message = "Lobby does not exist!"

    def __init__(self, lobby_id: str):
        self.lobby_id = lobby_id
        super().__init__(f"Lobby {lobby_id!r} does not exist!")


class BodyTooLong(LobbyError):
    message = "Message is too long!"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Message is too long! (max {limit} characters)")


class NameTooLong(LobbyError):
    message = "Username is too long!"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Username is too long! (max {limit} characters)")


class SenderNotFound(LobbyError):
    status_code = 404
    message = "Sender not found!"

    def __init__(self, lobby_id: str, name: str):
        self.lobby_id = lobby_id
        self.name = name
        super().__init__(f"Sender {name!r} not found in lobby {lobby_id!r}!")
