"""Engine, session factory and declarative base for the feed store."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from chirp_feed.core.settings import settings

IN_MEMORY_SQLITE_URLS = frozenset({"sqlite://", "sqlite:///:memory:"})


class Base(DeclarativeBase):
    """Declarative base shared by the feed tables."""


def utcnow() -> datetime:
    """Timezone-aware default for ``created_at`` columns."""
    return datetime.now(UTC)


# Model modules register their tables on Base.metadata when imported.
import chirp_feed.models  # noqa: E402,F401


def configure_engine(url: str, *, echo: bool = False) -> Engine:
    """Create an engine for ``url``.

    SQLite connections are shared with the threadpool FastAPI runs sync
    dependencies on, and an in-memory database is pinned to one connection
    so every session sees the same tables.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=echo)

    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if url in IN_MEMORY_SQLITE_URLS:
        options["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **options)


engine = configure_engine(settings.effective_database_url, echo=settings.sql_debug)

SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session; feed reads never commit."""
    with SessionLocal() as db:
        yield db


def create_tables(bind: Engine | None = None) -> None:
    """Create every feed table on ``bind`` (the application engine by default)."""
    Base.metadata.create_all(bind=bind or engine)
