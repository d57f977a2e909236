"""
Pydantic schemas for API response models.

These schemas define the structure of API data for serialization.
"""

from .feed import FeedPage, PlaceholderResponse, ProfileResponse, UserPage
from .post import AuthorSummary, PostDetail
from .user import UserDetail, UserProfile, UserPublic

__all__ = [
    "FeedPage", "PlaceholderResponse", "ProfileResponse", "UserPage",
    "AuthorSummary", "PostDetail",
    "UserDetail", "UserProfile", "UserPublic",
]
