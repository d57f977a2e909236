"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserPublic(BaseModel):
    """Public profile fields of an account; credentials are never included."""

    id: int
    username: str
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserDetail(UserPublic):
    """Public profile annotated with the viewer's relationship to it."""

    is_following: bool = Field(False, description="Viewer follows this user")
    follows_viewer: bool = Field(False, description="This user follows the viewer")


class UserProfile(UserDetail):
    """Profile page payload with graph counts."""

    follower_count: int = Field(..., alias="followerCount")
    following_count: int = Field(..., alias="followingCount")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
