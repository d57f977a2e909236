"""SQLAlchemy models for the Chirp Feed service."""

from .follow import Follow
from .like import PostLike
from .post import Post, PostMedia
from .user import User

__all__ = [
    "Follow",
    "PostLike",
    "Post", "PostMedia",
    "User",
]
