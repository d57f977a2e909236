"""Data access helpers for working with posts."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from chirp_feed.models.post import Post
from chirp_feed.services.criteria import Criterion, combine
from chirp_feed.services.pagination import Pagination

__all__ = ["PostRepository"]

logger = logging.getLogger(__name__)


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def query(self, criteria: Sequence[Criterion], pagination: Pagination) -> list[Post]:
        """Return one page of posts matching every criterion, newest first.

        Ties on ``created_at`` are broken by descending id so that repeated
        requests for the same page see the same rows.

        Args:
            criteria: Criteria AND-ed together; empty selects all posts.
            pagination: Page and limit; skip/limit apply after filtering.
        """
        logger.debug(
            "Querying posts criteria=%r page=%d limit=%d",
            criteria,
            pagination.page,
            pagination.limit,
        )
        stmt = (
            select(Post)
            .where(combine(criteria))
            .order_by(Post.created_at.desc(), Post.id.desc())
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        return list(self.session.execute(stmt).scalars())

    def count_replies(self, post_ids: Iterable[int]) -> dict[int, int]:
        """Return the number of direct replies for each of ``post_ids``."""
        ids = sorted(set(post_ids))
        if not ids:
            return {}
        rows = self.session.execute(
            select(Post.parent_post_id, func.count(Post.id))
            .where(Post.parent_post_id.in_(ids))
            .group_by(Post.parent_post_id)
        ).all()
        return {int(parent_id): int(total) for parent_id, total in rows}
