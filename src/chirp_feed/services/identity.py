"""Username to account resolution."""
from __future__ import annotations

from sqlalchemy.orm import Session

from chirp_feed.core.errors import NotFoundError
from chirp_feed.models.user import User
from chirp_feed.repositories.user_repo import UserRepository


def resolve_user(db: Session, username: str) -> User:
    """Return the user with exactly ``username``.

    Raises:
        NotFoundError: If no user has that username.
    """
    user = UserRepository(db).get_by_username(username)
    if user is None:
        raise NotFoundError(f"No such user exists with username {username}")
    return user
