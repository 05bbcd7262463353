"""SQLAlchemy engine, session factory and declarative base."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from cafe_finder.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite gets thread-sharing enabled (and one shared
    connection when in-memory, so every session sees the same database)."""
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


def init_db(bind: Engine) -> None:
    """Create missing tables."""
    # Model registration on Base.metadata
    from cafe_finder.adapters.persistence import models  # noqa: F401

    Base.metadata.create_all(bind)


engine = make_engine(settings.database_url, echo=settings.debug)
session_factory = sessionmaker(engine, expire_on_commit=False)
