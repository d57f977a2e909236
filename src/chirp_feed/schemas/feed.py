"""Response envelopes shared by the feed and discovery endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from .post import PostDetail
from .user import UserProfile, UserPublic


class FeedPage(BaseModel):
    """One page of enriched posts."""

    page: int
    limit: int
    nb_hits: int = Field(..., alias="nbHits", description="Records in this page")
    response: list[PostDetail]

    model_config = ConfigDict(populate_by_name=True)


class UserPage(BaseModel):
    """One page of user suggestions."""

    page: int
    limit: int
    nb_hits: int = Field(..., alias="nbHits", description="Records in this page")
    response: list[UserPublic]

    model_config = ConfigDict(populate_by_name=True)


class ProfileResponse(BaseModel):
    """Envelope for a single user profile."""

    response: UserProfile


class PlaceholderResponse(BaseModel):
    """Body returned by feeds that are not implemented yet."""

    detail: str
