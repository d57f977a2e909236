"""Read access to the directed follow graph."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from chirp_feed.models.follow import Follow

__all__ = ["FollowRepository"]


class FollowRepository:
    """Answers who follows whom.

    An edge means ``follower_user_id`` follows ``followed_user_id``. Users
    without edges yield zero counts and empty sets.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_followers(self, user_id: int) -> int:
        """Return how many users follow ``user_id``."""
        total = self.session.execute(
            select(func.count()).select_from(Follow).where(Follow.followed_user_id == user_id)
        ).scalar()
        return int(total or 0)

    def count_following(self, user_id: int) -> int:
        """Return how many users ``user_id`` follows."""
        total = self.session.execute(
            select(func.count()).select_from(Follow).where(Follow.follower_user_id == user_id)
        ).scalar()
        return int(total or 0)

    def following_ids(self, user_id: int | None) -> set[int]:
        """Return the ids ``user_id`` follows; empty for an anonymous viewer."""
        if user_id is None:
            return set()
        rows = self.session.execute(
            select(Follow.followed_user_id).where(Follow.follower_user_id == user_id)
        ).scalars()
        return {int(followed_id) for followed_id in rows}

    def follower_ids_among(self, user_id: int, candidate_ids: Iterable[int]) -> set[int]:
        """Return which of ``candidate_ids`` follow ``user_id``."""
        ids = sorted(set(candidate_ids))
        if not ids:
            return set()
        rows = self.session.execute(
            select(Follow.follower_user_id).where(
                Follow.followed_user_id == user_id,
                Follow.follower_user_id.in_(ids),
            )
        ).scalars()
        return {int(follower_id) for follower_id in rows}
