"""SQLAlchemy model for user accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from chirp_feed.db.session import Base, utcnow


class User(Base):
    """Registered account that authors posts and follows other users.

    Accounts are created by the write path; the feed service only reads them.
    """

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Case-sensitive handle, immutable once created.
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    # Never serialized; public schemas omit it.
    password_hash: Mapped[str] = mapped_column(Text, nullable=False, default="")
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
