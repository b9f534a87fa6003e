"""Chat message model."""

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Message(Base):
    __tablename__ = "messages"
    # Ids must never be reused, even for the highest row.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lobby_id: Mapped[str] = mapped_column(ForeignKey("lobbies.id"), nullable=False, index=True)
    sender_name: Mapped[str] = mapped_column(String(32), nullable=False)
    body: Mapped[str] = mapped_column(String(512), nullable=False)

    # Seconds since epoch, assigned by the server.
    timestamp: Mapped[int] = mapped_column(BigInteger, nullable=False)
