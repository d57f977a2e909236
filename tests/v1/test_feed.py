"""Tests for global feed endpoints."""

from fastapi import status
from sqlalchemy.exc import OperationalError

from chirp_feed.api.v1.dependencies import get_feed_composer
from chirp_feed.services.feed import FOR_YOU_PLACEHOLDER


def test_recents_feed(client, make_user, make_post) -> None:
    author = make_user("author")
    older = make_post(author, "older")
    newer = make_post(author, "newer")

    r = client.get("/api/v1/feed/recents")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["page"] == 1
    assert data["limit"] == 10
    assert data["nbHits"] == 2
    assert [post["id"] for post in data["response"]] == [newer.id, older.id]


def test_media_feeds_are_disjoint_from_text(client, make_user, make_post) -> None:
    author = make_user("author")
    text = make_post(author, "text")
    photo = make_post(author, "photo", media=["a.jpeg"])
    video = make_post(author, "video", media=["b.webm"])

    def ids(path: str) -> list[int]:
        return [post["id"] for post in client.get(path).json()["response"]]

    assert ids("/api/v1/feed/text") == [text.id]
    assert ids("/api/v1/feed/photos") == [photo.id]
    assert ids("/api/v1/feed/videos") == [video.id]


def test_following_feed_requires_authentication(client) -> None:
    r = client.get("/api/v1/feed/following")
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_following_feed(client, make_user, make_post, follow, like, auth_headers) -> None:
    alice = make_user("alice")
    bob = make_user("bob")
    carol = make_user("carol")
    follow(alice, bob)
    mine = make_post(alice, "mine")
    theirs = make_post(bob, "theirs")
    make_post(carol, "unrelated")
    like(alice, theirs)

    r = client.get("/api/v1/feed/following", headers=auth_headers(alice))
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert [post["id"] for post in data["response"]] == [theirs.id, mine.id]
    assert [post["is_liked"] for post in data["response"]] == [True, False]


def test_invalid_token_is_rejected(client, make_user, make_post) -> None:
    r = client.get("/api/v1/feed/recents", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == status.HTTP_401_UNAUTHORIZED


def test_for_you_placeholder(client) -> None:
    r = client.get("/api/v1/feed/for-you")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"detail": FOR_YOU_PLACEHOLDER}


def test_storage_failure_is_reported_without_internals(app, client) -> None:
    class BrokenComposer:
        def recents_feed(self, pagination, viewer):
            raise OperationalError("SELECT secret FROM post", {}, Exception("db gone"))

    app.dependency_overrides[get_feed_composer] = lambda: BrokenComposer()
    try:
        r = client.get("/api/v1/feed/recents")
    finally:
        app.dependency_overrides.pop(get_feed_composer, None)

    assert r.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert r.json() == {"detail": "Storage unavailable"}
    assert "secret" not in r.text


def test_oversized_page_falls_back_to_first_page(client, make_user, make_post) -> None:
    post = make_post(make_user("author"), "only post")

    r = client.get("/api/v1/feed/recents", params={"page": "99999999999999999999"})
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["page"] == 1
    assert [item["id"] for item in data["response"]] == [post.id]
