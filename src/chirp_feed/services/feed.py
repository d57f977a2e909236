"""Feed composition: criteria selection, pagination and enrichment.

Every variant follows the same steps. It resolves the path user when there
is one, builds its criteria, queries one page of posts and only then hands
that page to the enrichment gateway.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from sqlalchemy.orm import Session

from chirp_feed.core.errors import AuthenticationRequiredError
from chirp_feed.core.security import Viewer
from chirp_feed.repositories.follow_repo import FollowRepository
from chirp_feed.repositories.like_repo import LikeRepository
from chirp_feed.repositories.post_repo import PostRepository
from chirp_feed.schemas.feed import FeedPage, PlaceholderResponse
from chirp_feed.schemas.user import UserProfile
from chirp_feed.services.criteria import (
    IMAGE_EXTENSIONS,
    MEDIA_EXTENSIONS,
    VIDEO_EXTENSIONS,
    ByAuthor,
    Criterion,
    HasMediaOfKind,
    IsReply,
    WithoutMedia,
    author_in,
    id_in,
)
from chirp_feed.services.enrichment import EnrichmentGateway
from chirp_feed.services.identity import resolve_user
from chirp_feed.services.pagination import Pagination

logger = logging.getLogger(__name__)

FOR_YOU_PLACEHOLDER: Final[str] = "The for-you feed is not available yet"


class FeedComposer:
    """Builds each feed variant for an optional viewer."""

    def __init__(self, db: Session, enrichment: EnrichmentGateway) -> None:
        self.db = db
        self.enrichment = enrichment
        self.posts = PostRepository(db)
        self.follows = FollowRepository(db)
        self.likes = LikeRepository(db)

    def _page(
        self,
        criteria: Sequence[Criterion],
        pagination: Pagination,
        viewer: Viewer | None,
    ) -> FeedPage:
        posts = self.posts.query(criteria, pagination)
        records = self.enrichment.enrich_posts(posts, viewer)
        return FeedPage(
            page=pagination.page,
            limit=pagination.limit,
            nb_hits=len(records),
            response=records,
        )

    # Profile and per-user timelines

    def get_user(self, username: str, viewer: Viewer | None) -> UserProfile:
        """Return a profile with follower and following counts.

        Raises:
            NotFoundError: If ``username`` does not exist.
        """
        user = resolve_user(self.db, username)
        detail = self.enrichment.enrich_users([user], viewer)[0]
        return UserProfile(
            **detail.model_dump(),
            follower_count=self.follows.count_followers(user.id),
            following_count=self.follows.count_following(user.id),
        )

    def user_posts(self, username: str, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Root posts written by ``username``."""
        user = resolve_user(self.db, username)
        return self._page([ByAuthor(user.id), IsReply(False)], pagination, viewer)

    def user_replies(
        self, username: str, pagination: Pagination, viewer: Viewer | None
    ) -> FeedPage:
        """Replies written by ``username``."""
        user = resolve_user(self.db, username)
        return self._page([ByAuthor(user.id), IsReply(True)], pagination, viewer)

    def user_likes(self, username: str, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts liked by ``username``.

        The like lookup is unpaged; pagination applies to the distinct posts
        it references, ordered by post creation time.
        """
        user = resolve_user(self.db, username)
        liked_ids = self.likes.liked_post_ids(user.id)
        return self._page([id_in(liked_ids)], pagination, viewer)

    def user_media(self, username: str, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts by ``username`` carrying an image or video."""
        user = resolve_user(self.db, username)
        return self._page(
            [ByAuthor(user.id), HasMediaOfKind(MEDIA_EXTENSIONS)], pagination, viewer
        )

    # Global feeds

    def following_feed(self, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts by the viewer and everyone the viewer follows.

        Raises:
            AuthenticationRequiredError: If the request is anonymous.
        """
        if viewer is None:
            raise AuthenticationRequiredError("Authentication required for the following feed")
        authors = self.follows.following_ids(viewer.user_id) | {viewer.user_id}
        logger.debug("Following feed for user %s spans %d authors", viewer.user_id, len(authors))
        return self._page([author_in(authors)], pagination, viewer)

    def recents_feed(self, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Every post, newest first."""
        return self._page([], pagination, viewer)

    def text_feed(self, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts without any media attachment."""
        return self._page([WithoutMedia()], pagination, viewer)

    def photos_feed(self, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts with at least one image attachment."""
        return self._page([HasMediaOfKind(IMAGE_EXTENSIONS)], pagination, viewer)

    def videos_feed(self, pagination: Pagination, viewer: Viewer | None) -> FeedPage:
        """Posts with at least one video attachment."""
        return self._page([HasMediaOfKind(VIDEO_EXTENSIONS)], pagination, viewer)

    def for_you_feed(
        self, pagination: Pagination, viewer: Viewer | None
    ) -> PlaceholderResponse:
        """Personalized feed entry point; intentionally returns a placeholder."""
        return PlaceholderResponse(detail=FOR_YOU_PLACEHOLDER)
