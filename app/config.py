"""
Lobby Chat – Application configuration.
Reads environment variables from a .env file via pydantic-settings.
"""

from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── App ──
    APP_NAME: str = "Lobby Chat"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Storage ──
    STORE_BACKEND: Literal["sql", "memory"] = "sql"
    DATABASE_URL: str = "sqlite+aiosqlite:///./chat.db"

    # ── Lobby rules ──
    LOBBY_ID_LENGTH: int = 6
    LOBBY_ID_ATTEMPTS: int = 10
    MAX_MESSAGE_LENGTH: int = 512
    MAX_USERNAME_LENGTH: int = 32

    # ── HTTP ──
    CORS_ORIGINS: List[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # ── TLS ──
    USE_TLS: bool = False
    TLS_PORT: int = 8443
    TLS_CERT_FILE: Optional[str] = None
    TLS_KEY_FILE: Optional[str] = None

settings = Settings()
