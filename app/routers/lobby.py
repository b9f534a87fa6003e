"""Lobby router — create, join, post, typing updates, and polling.

Paths match the ones the web client already calls.
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from app.schemas.lobby import EnterLobbyRequest, LobbyView, PostMessageRequest, TypingUpdateRequest
from app.services.lobby_service import LobbyService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lobby"])


def get_lobby_service(request: Request) -> LobbyService:
    """Return the service the application built at startup."""
    return request.app.state.lobby_service


@router.get("/lobby/{lobby_id}", response_model=LobbyView)
async def fetch_lobby(lobby_id: str, service: LobbyService = Depends(get_lobby_service)):
    """Poll a lobby's messages and senders."""
    return await service.fetch_view(lobby_id)


@router.post("/postMessage", response_model=LobbyView, status_code=status.HTTP_201_CREATED)
async def post_message(req: PostMessageRequest, service: LobbyService = Depends(get_lobby_service)):
    return await service.post_message(req.lobby_id, req.sender_name, req.body)


@router.get("/lobbyExists/{lobby_id}", response_model=bool)
async def lobby_exists(lobby_id: str, service: LobbyService = Depends(get_lobby_service)):
    return await service.lobby_exists(lobby_id)


@router.post("/createLobby", response_model=str, status_code=status.HTTP_201_CREATED)
async def create_lobby(service: LobbyService = Depends(get_lobby_service)):
    """Create a lobby and return its code."""
    lobby_id = await service.create_lobby()
    logger.info("Created lobby %s", lobby_id)
    return lobby_id


@router.post("/enterLobby", response_model=LobbyView)
async def enter_lobby(req: EnterLobbyRequest, service: LobbyService = Depends(get_lobby_service)):
    """Join a lobby under a display name. Joining twice is harmless."""
    return await service.enter_lobby(req.lobby_id, req.name)


@router.post("/updateTyping")
async def update_typing(req: TypingUpdateRequest, service: LobbyService = Depends(get_lobby_service)):
    await service.set_typing(req.lobby_id, req.name, req.is_typing)
    return {}
