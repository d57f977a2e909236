"""Read-only data access helpers over the feed collections."""

from .follow_repo import FollowRepository
from .like_repo import LikeRepository
from .post_repo import PostRepository
from .user_repo import UserRepository

__all__ = [
    "FollowRepository",
    "LikeRepository",
    "PostRepository",
    "UserRepository",
]
