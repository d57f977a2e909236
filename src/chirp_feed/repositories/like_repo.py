"""Read access to likes on posts."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from chirp_feed.models.like import PostLike

__all__ = ["LikeRepository"]


class LikeRepository:
    """Queries over the user → post like edges."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def liked_post_ids(self, user_id: int) -> list[int]:
        """Return every post id ``user_id`` liked, most recent like first.

        Duplicated edges collapse to the position of their newest like.
        """
        rows = self.session.execute(
            select(PostLike.post_id)
            .where(PostLike.user_id == user_id)
            .order_by(PostLike.created_at.desc())
        ).scalars()
        return list(dict.fromkeys(int(post_id) for post_id in rows))

    def liked_among(self, user_id: int, post_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``post_ids`` that ``user_id`` liked."""
        ids = sorted(set(post_ids))
        if not ids:
            return set()
        rows = self.session.execute(
            select(PostLike.post_id).where(
                PostLike.user_id == user_id,
                PostLike.post_id.in_(ids),
            )
        ).scalars()
        return {int(post_id) for post_id in rows}

    def count_by_post(self, post_ids: Iterable[int]) -> dict[int, int]:
        """Return the like count for each of ``post_ids`` that has any."""
        ids = sorted(set(post_ids))
        if not ids:
            return {}
        rows = self.session.execute(
            select(PostLike.post_id, func.count())
            .where(PostLike.post_id.in_(ids))
            .group_by(PostLike.post_id)
        ).all()
        return {int(post_id): int(total) for post_id, total in rows}
