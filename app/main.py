"""
Lobby Chat — FastAPI application entry-point.

Run with:
    uvicorn app.main:app --reload
or, honouring the HOST/PORT/TLS settings:
    lobby-chat
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings
from app.exceptions import LobbyError
from app.logging_config import setup_logging
from app.routers import lobby
from app.services.lobby_service import LobbyService
from app.store import build_store

logger = logging.getLogger(__name__)


async def lobby_error_handler(request: Request, exc: LobbyError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application; the state store lives as long as the app."""

    # ── Lifespan: open the store and wire the service ──
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = build_store(app_settings)
        await store.init()
        app.state.lobby_service = LobbyService.from_settings(store, app_settings)
        logger.info("Lobby store ready (%s backend)", app_settings.STORE_BACKEND)
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Poll-based multi-room chat: lobbies, messages and typing indicators.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LobbyError, lobby_error_handler)

    # ── Register API routers ──
    app.include_router(lobby.router)

    return app


setup_logging(settings.LOG_LEVEL)
app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn, over TLS when USE_TLS is set."""
    if settings.USE_TLS:
        uvicorn.run(
            "app.main:app",
            host=settings.HOST,
            port=settings.TLS_PORT,
            ssl_certfile=settings.TLS_CERT_FILE,
            ssl_keyfile=settings.TLS_KEY_FILE,
        )
    else:
        uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
