"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AuthorSummary(BaseModel):
    """Minimal author information embedded in each post."""

    id: int
    username: str
    display_name: str | None = None
    avatar_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PostDetail(BaseModel):
    """Post annotated with counts and viewer-relative state."""

    id: int
    author: AuthorSummary
    parent_post_id: int | None = None
    body_md: str
    media: list[str] = Field(default_factory=list)
    created_at: datetime
    like_count: int = 0
    reply_count: int = 0
    is_liked: bool = Field(False, description="Viewer has liked this post")
