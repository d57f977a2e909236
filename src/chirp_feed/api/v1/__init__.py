"""Version 1 API endpoints."""

from .endpoints import feed_router, users_router

__all__ = [
    "feed_router",
    "users_router",
]
