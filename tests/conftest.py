# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from chirp_feed.core.security import Viewer, create_access_token
from chirp_feed.core.settings import Settings, get_settings
from chirp_feed.db.session import Base, configure_engine, create_tables
from chirp_feed.db.session import get_db as app_get_session
from chirp_feed.main import app as fastapi_app
from chirp_feed.models import Follow, Post, PostLike, PostMedia, User
from chirp_feed.services.enrichment import SqlEnrichmentGateway
from chirp_feed.services.feed import FeedComposer

TEST_DB_URL = "sqlite://"
FEATURED = ["captainfaisal", "patilrohit", "nadeemkhan"]

# Fixed clock so that "newest first" is deterministic across fixtures.
_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)
_TICKS = count(1)


def _next_timestamp() -> datetime:
    return _EPOCH + timedelta(minutes=next(_TICKS))


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = configure_engine(TEST_DB_URL)
    create_tables(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings with a known signing key and featured list."""
    return Settings(
        secret_key="test-secret",
        featured_usernames=FEATURED,
        database_url=TEST_DB_URL,
    )


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI, db_session: Session, test_settings: Settings
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_settings, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with increasing creation times."""

    def _make_user(username: str, **fields: object) -> User:
        user = User(
            username=username,
            password_hash=f"hashed-{username}",
            display_name=fields.pop("display_name", username.title()),
            created_at=fields.pop("created_at", _next_timestamp()),
            **fields,
        )
        db_session.add(user)
        db_session.flush()
        return user

    return _make_user


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory that persists posts with increasing creation times."""

    def _make_post(
        author: User,
        body: str = "hello",
        *,
        media: list[str] | None = None,
        parent: Post | None = None,
        created_at: datetime | None = None,
    ) -> Post:
        post = Post(
            author_user_id=author.id,
            parent_post_id=parent.id if parent is not None else None,
            body_md=body,
            created_at=created_at or _next_timestamp(),
        )
        post.media = [
            PostMedia(position=index, url=url) for index, url in enumerate(media or [])
        ]
        db_session.add(post)
        db_session.flush()
        return post

    return _make_post


@pytest.fixture()
def follow(db_session: Session) -> Callable[[User, User], Follow]:
    """Return a helper recording that the first user follows the second."""

    def _follow(follower: User, followed: User) -> Follow:
        edge = Follow(
            follower_user_id=follower.id,
            followed_user_id=followed.id,
            created_at=_next_timestamp(),
        )
        db_session.add(edge)
        db_session.flush()
        return edge

    return _follow


@pytest.fixture()
def like(db_session: Session) -> Callable[[User, Post], PostLike]:
    """Return a helper recording that a user liked a post."""

    def _like(user: User, post: Post) -> PostLike:
        edge = PostLike(user_id=user.id, post_id=post.id, created_at=_next_timestamp())
        db_session.add(edge)
        db_session.flush()
        return edge

    return _like


@pytest.fixture()
def composer(db_session: Session) -> FeedComposer:
    return FeedComposer(db_session, SqlEnrichmentGateway(db_session))


@pytest.fixture()
def as_viewer() -> Callable[[User], Viewer]:
    """Return a helper turning a persisted user into a request viewer."""

    def _as_viewer(user: User) -> Viewer:
        return Viewer(user_id=user.id, username=user.username)

    return _as_viewer


@pytest.fixture()
def auth_headers(test_settings: Settings) -> Callable[[User], dict[str, str]]:
    """Return a helper building bearer headers for a user."""

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(user.id, user.username, config=test_settings)
        return {"Authorization": f"Bearer {token}"}

    return _headers
