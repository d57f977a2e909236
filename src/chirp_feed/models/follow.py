"""SQLAlchemy model for directed follow edges."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from chirp_feed.db.session import Base, utcnow


class Follow(Base):
    """Edge recording that ``follower_user_id`` follows ``followed_user_id``."""

    __tablename__ = "follow"
    __table_args__ = (
        CheckConstraint("follower_user_id <> followed_user_id", name="ck_follow_no_self"),
        Index("ix_follow_followed", "followed_user_id"),
    )

    # Composite primary key prevents duplicate edges.
    follower_user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    followed_user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
