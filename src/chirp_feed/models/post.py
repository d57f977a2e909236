"""SQLAlchemy models for posts and their media attachments."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chirp_feed.db.session import Base, utcnow


class Post(Base):
    """Short user-authored post, either a root post or a reply."""

    __tablename__ = "post"
    __table_args__ = (
        Index("ix_post_author_created", "author_user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user_account.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Parent chain for replies; root posts have parent_post_id = NULL.
    parent_post_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("post.id"),
        nullable=True,
        index=True,
    )

    body_md: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    media: Mapped[list[PostMedia]] = relationship(
        "PostMedia",
        order_by="PostMedia.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def media_urls(self) -> list[str]:
        """Return attachment URLs in their original order."""
        return [item.url for item in self.media]


class PostMedia(Base):
    """One entry of a post's ordered media sequence."""

    __tablename__ = "post_media"

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    position: Mapped[int] = mapped_column(Integer, primary_key=True)
    # URL or storage path; the file extension decides the media kind.
    url: Mapped[str] = mapped_column(Text, nullable=False)
