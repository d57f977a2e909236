"""Viewer-relative enrichment of raw post and user records.

Feed composition treats enrichment as a collaborator: it hands over an
already-paginated record list plus the optional viewer and gets back the
same records, in the same order, annotated for that viewer.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.orm import Session

from chirp_feed.core.security import Viewer
from chirp_feed.models.post import Post
from chirp_feed.models.user import User
from chirp_feed.repositories.follow_repo import FollowRepository
from chirp_feed.repositories.like_repo import LikeRepository
from chirp_feed.repositories.post_repo import PostRepository
from chirp_feed.repositories.user_repo import UserRepository
from chirp_feed.schemas.post import AuthorSummary, PostDetail
from chirp_feed.schemas.user import UserDetail

logger = logging.getLogger(__name__)


class EnrichmentGateway(Protocol):
    """Order-preserving, cardinality-preserving record annotator."""

    def enrich_posts(self, posts: Sequence[Post], viewer: Viewer | None) -> list[PostDetail]:
        """Return one ``PostDetail`` per post, in input order."""
        ...

    def enrich_users(self, users: Sequence[User], viewer: Viewer | None) -> list[UserDetail]:
        """Return one ``UserDetail`` per user, in input order."""
        ...


class SqlEnrichmentGateway:
    """Enrichment backed by batched queries against the feed database.

    Each call issues a fixed number of queries regardless of how many records
    it annotates.
    """

    def __init__(self, db: Session) -> None:
        self._users = UserRepository(db)
        self._posts = PostRepository(db)
        self._likes = LikeRepository(db)
        self._follows = FollowRepository(db)

    def enrich_posts(self, posts: Sequence[Post], viewer: Viewer | None) -> list[PostDetail]:
        if not posts:
            return []
        post_ids = [post.id for post in posts]
        authors = self._users.list_by_ids(post.author_user_id for post in posts)
        like_counts = self._likes.count_by_post(post_ids)
        reply_counts = self._posts.count_replies(post_ids)
        liked = self._likes.liked_among(viewer.user_id, post_ids) if viewer else set()

        details: list[PostDetail] = []
        for post in posts:
            author = authors.get(post.author_user_id)
            if author is None:
                # Author removed between the post query and this lookup.
                logger.warning("Post %s references missing author %s", post.id, post.author_user_id)
                summary = AuthorSummary(id=post.author_user_id, username="")
            else:
                summary = AuthorSummary.model_validate(author)
            details.append(
                PostDetail(
                    id=post.id,
                    author=summary,
                    parent_post_id=post.parent_post_id,
                    body_md=post.body_md,
                    media=post.media_urls,
                    created_at=post.created_at,
                    like_count=like_counts.get(post.id, 0),
                    reply_count=reply_counts.get(post.id, 0),
                    is_liked=post.id in liked,
                )
            )
        return details

    def enrich_users(self, users: Sequence[User], viewer: Viewer | None) -> list[UserDetail]:
        if not users:
            return []
        following: set[int] = set()
        followers: set[int] = set()
        if viewer is not None:
            following = self._follows.following_ids(viewer.user_id)
            followers = self._follows.follower_ids_among(viewer.user_id, (u.id for u in users))

        return [
            UserDetail.model_validate(user).model_copy(
                update={
                    "is_following": user.id in following,
                    "follows_viewer": user.id in followers,
                }
            )
            for user in users
        ]
