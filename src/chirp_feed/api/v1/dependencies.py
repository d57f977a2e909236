"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from chirp_feed.core.security import Viewer, decode_access_token
from chirp_feed.core.settings import Settings, get_settings
from chirp_feed.db.session import get_db
from chirp_feed.repositories.user_repo import UserRepository
from chirp_feed.services.discovery import DiscoveryRanker
from chirp_feed.services.enrichment import EnrichmentGateway, SqlEnrichmentGateway
from chirp_feed.services.feed import FeedComposer
from chirp_feed.services.pagination import Pagination

# HTTP Bearer scheme; anonymous requests are allowed through.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_optional_viewer(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
    config: SettingsDep,
) -> Viewer | None:
    """Return the viewer identified by the bearer token, or None if absent.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session
        config: Settings holding the token signing key

    Returns:
        Viewer for the authenticated user, or None for anonymous requests

    Raises:
        HTTPException: If a token is present but invalid or its user is gone
    """
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials, config=config)
    except JWTError as err:
        raise _credentials_error() from err

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as err:
        raise _credentials_error() from err

    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise _credentials_error("User not found")
    return Viewer(user_id=user.id, username=user.username)


OptionalViewerDep = Annotated[Viewer | None, Depends(get_optional_viewer)]


def get_current_viewer(viewer: OptionalViewerDep) -> Viewer:
    """Return the authenticated viewer, rejecting anonymous requests."""
    if viewer is None:
        raise _credentials_error("Not authenticated")
    return viewer


# Type alias for current viewer dependency
CurrentViewerDep = Annotated[Viewer, Depends(get_current_viewer)]


def get_pagination(
    config: SettingsDep,
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Records per page")] = None,
) -> Pagination:
    """Normalize raw ``page``/``limit`` query strings; never rejects input."""
    return Pagination.from_params(
        page,
        limit,
        default_page=config.default_page,
        default_limit=config.default_limit,
    )


PaginationDep = Annotated[Pagination, Depends(get_pagination)]


def get_enrichment_gateway(db: SessionDep) -> EnrichmentGateway:
    """Return the enrichment collaborator for this request."""
    return SqlEnrichmentGateway(db)


def get_feed_composer(
    db: SessionDep,
    enrichment: Annotated[EnrichmentGateway, Depends(get_enrichment_gateway)],
) -> FeedComposer:
    """Return a feed composer bound to the request session."""
    return FeedComposer(db, enrichment)


def get_discovery_ranker(db: SessionDep, config: SettingsDep) -> DiscoveryRanker:
    """Return a discovery ranker using the configured featured usernames."""
    return DiscoveryRanker(db, config.featured_usernames)


FeedComposerDep = Annotated[FeedComposer, Depends(get_feed_composer)]
DiscoveryRankerDep = Annotated[DiscoveryRanker, Depends(get_discovery_ranker)]
