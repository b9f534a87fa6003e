"""Lobby model."""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Lobby(Base):
    """
    A Lobby is a chat room addressed by a short random code.
    Messages and Senders belong to a Lobby. Lobbies are never deleted.
    """
    __tablename__ = "lobbies"

    id: Mapped[str] = mapped_column(String(16), primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
