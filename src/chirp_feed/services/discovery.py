"""Two-tier user suggestions.

Featured accounts (tier 1) are always listed first and in full, so new or
disconnected viewers see them on every page. The rest of the population
(tier 2) follows, newest first, and is the only part that is paginated.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from chirp_feed.core.security import Viewer
from chirp_feed.models.user import User
from chirp_feed.repositories.follow_repo import FollowRepository
from chirp_feed.repositories.user_repo import UserRepository
from chirp_feed.schemas.feed import UserPage
from chirp_feed.schemas.user import UserPublic
from chirp_feed.services.pagination import Pagination

logger = logging.getLogger(__name__)


class DiscoveryRanker:
    """Suggests accounts a viewer is not yet connected to."""

    def __init__(self, db: Session, featured_usernames: Sequence[str]) -> None:
        """Initialize with a session and the ordered featured usernames."""
        self.users = UserRepository(db)
        self.follows = FollowRepository(db)
        self.featured_usernames = tuple(dict.fromkeys(featured_usernames))

    def _featured(self, excluded_ids: set[int], excluded_names: list[str]) -> list[User]:
        rows = self.users.list_with_usernames(
            self.featured_usernames,
            exclude_ids=excluded_ids,
            exclude_usernames=excluded_names,
        )
        rank = {name: index for index, name in enumerate(self.featured_usernames)}
        return sorted(rows, key=lambda user: rank[user.username])

    def suggest_users(self, viewer: Viewer | None, pagination: Pagination) -> UserPage:
        """Return featured users followed by one page of remaining users.

        For a signed-in viewer, already-followed accounts and the viewer
        itself are excluded from both tiers. Anonymous viewers get no
        exclusions. ``nb_hits`` counts both tiers together.
        """
        excluded_ids: set[int] = set()
        excluded_names: list[str] = []
        if viewer is not None:
            excluded_ids = self.follows.following_ids(viewer.user_id) | {viewer.user_id}
            excluded_names = [viewer.username]

        priority = self._featured(excluded_ids, excluded_names)
        remaining = self.users.list_newest(
            pagination,
            exclude_ids=excluded_ids,
            exclude_usernames=[*excluded_names, *self.featured_usernames],
        )
        logger.debug(
            "Suggesting %d featured and %d remaining users (page=%d)",
            len(priority),
            len(remaining),
            pagination.page,
        )

        combined = [UserPublic.model_validate(user) for user in [*priority, *remaining]]
        return UserPage(
            page=pagination.page,
            limit=pagination.limit,
            nb_hits=len(combined),
            response=combined,
        )
