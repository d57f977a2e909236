"""User profile, timeline and discovery endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from chirp_feed.api.v1.dependencies import (
    DiscoveryRankerDep,
    FeedComposerDep,
    OptionalViewerDep,
    PaginationDep,
)
from chirp_feed.schemas.feed import FeedPage, ProfileResponse, UserPage

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserPage)
async def suggest_users(
    ranker: DiscoveryRankerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> UserPage:
    """Suggest accounts to follow: featured users first, then newest users.

    Featured users are never paginated; only the newest-users tier moves
    with ``page`` and ``limit``.
    """
    return ranker.suggest_users(viewer, pagination)


@router.get("/{username}", response_model=ProfileResponse)
async def get_user(
    username: str,
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
) -> ProfileResponse:
    """Return a user's profile with follower and following counts."""
    return ProfileResponse(response=composer.get_user(username, viewer))


@router.get("/{username}/posts", response_model=FeedPage)
async def get_user_posts(
    username: str,
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """List a user's root posts, newest first."""
    return composer.user_posts(username, pagination, viewer)


@router.get("/{username}/replies", response_model=FeedPage)
async def get_user_replies(
    username: str,
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """List a user's replies, newest first."""
    return composer.user_replies(username, pagination, viewer)


@router.get("/{username}/likes", response_model=FeedPage)
async def get_user_likes(
    username: str,
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """List posts a user has liked, newest post first."""
    return composer.user_likes(username, pagination, viewer)


@router.get("/{username}/media", response_model=FeedPage)
async def get_user_media(
    username: str,
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """List a user's posts that carry images or videos."""
    return composer.user_media(username, pagination, viewer)
