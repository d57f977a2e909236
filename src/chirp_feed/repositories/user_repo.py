"""Data access helpers for user accounts."""
from __future__ import annotations

from collections.abc import Collection, Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from chirp_feed.models.user import User
from chirp_feed.services.pagination import Pagination

__all__ = ["UserRepository"]


class UserRepository:
    """Lookups and listings over user accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_username(self, username: str) -> User | None:
        """Return the user with exactly this username, if any."""
        return self.session.execute(
            select(User).where(User.username == username)
        ).scalars().first()

    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by primary key."""
        return self.session.get(User, user_id)

    def list_by_ids(self, user_ids: Iterable[int]) -> dict[int, User]:
        """Return users keyed by id for every id that exists."""
        ids = sorted(set(user_ids))
        if not ids:
            return {}
        rows = self.session.execute(select(User).where(User.id.in_(ids))).scalars()
        return {user.id: user for user in rows}

    def list_with_usernames(
        self,
        usernames: Collection[str],
        *,
        exclude_ids: Collection[int] = (),
        exclude_usernames: Collection[str] = (),
    ) -> list[User]:
        """Return users whose username is in ``usernames``, unpaginated."""
        if not usernames:
            return []
        stmt = select(User).where(User.username.in_(sorted(usernames)))
        if exclude_ids:
            stmt = stmt.where(User.id.not_in(sorted(exclude_ids)))
        if exclude_usernames:
            stmt = stmt.where(User.username.not_in(sorted(exclude_usernames)))
        return list(self.session.execute(stmt).scalars())

    def list_newest(
        self,
        pagination: Pagination,
        *,
        exclude_ids: Collection[int] = (),
        exclude_usernames: Collection[str] = (),
    ) -> list[User]:
        """Return one page of users newest first, skipping the exclusions."""
        stmt = select(User)
        if exclude_ids:
            stmt = stmt.where(User.id.not_in(sorted(exclude_ids)))
        if exclude_usernames:
            stmt = stmt.where(User.username.not_in(sorted(exclude_usernames)))
        stmt = (
            stmt.order_by(User.created_at.desc(), User.id.desc())
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        return list(self.session.execute(stmt).scalars())
