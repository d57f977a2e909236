"""Global feed endpoints for listing posts in various selections."""

from __future__ import annotations

from fastapi import APIRouter

from chirp_feed.api.v1.dependencies import (
    CurrentViewerDep,
    FeedComposerDep,
    OptionalViewerDep,
    PaginationDep,
)
from chirp_feed.schemas.feed import FeedPage, PlaceholderResponse

router = APIRouter(prefix="/feed", tags=["feed"])


@router.get("/for-you", response_model=PlaceholderResponse)
async def get_for_you_feed(
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> PlaceholderResponse:
    """Personalized feed; returns a placeholder until ranking exists."""
    return composer.for_you_feed(pagination, viewer)


@router.get("/following", response_model=FeedPage)
async def get_following_feed(
    composer: FeedComposerDep,
    viewer: CurrentViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """Posts from the viewer and the accounts the viewer follows."""
    return composer.following_feed(pagination, viewer)


@router.get("/recents", response_model=FeedPage)
async def get_recents_feed(
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """All posts, newest first."""
    return composer.recents_feed(pagination, viewer)


@router.get("/text", response_model=FeedPage)
async def get_text_feed(
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """Posts without media attachments."""
    return composer.text_feed(pagination, viewer)


@router.get("/photos", response_model=FeedPage)
async def get_photos_feed(
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """Posts with at least one image."""
    return composer.photos_feed(pagination, viewer)


@router.get("/videos", response_model=FeedPage)
async def get_videos_feed(
    composer: FeedComposerDep,
    viewer: OptionalViewerDep,
    pagination: PaginationDep,
) -> FeedPage:
    """Posts with at least one video."""
    return composer.videos_feed(pagination, viewer)
