"""
Lobby Chat – Async SQLAlchemy engine, session factory, and declarative base.
"""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


# ── Declarative base ──
class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ── Engine ──
def make_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for *database_url*."""
    engine_kwargs = {
        "echo": echo,
        "future": True,
    }

    # If using PostgreSQL behind PgBouncer (transaction mode), prepared
    # statement caching must be off.
    if "postgresql" in database_url:
        engine_kwargs["connect_args"] = {"statement_cache_size": 0}

    engine = create_async_engine(database_url, **engine_kwargs)

    # SQLite ignores FOREIGN KEY clauses unless asked per connection.
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return engine


# ── Session factory ──
def make_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
