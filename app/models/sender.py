"""Sender model — one participant name within one lobby."""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Sender(Base):
    __tablename__ = "senders"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    lobby_id: Mapped[str] = mapped_column(ForeignKey("lobbies.id"), primary_key=True)

    is_typing: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
