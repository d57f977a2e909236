"""Tests for the two-tier user discovery ranker."""

from chirp_feed.services.discovery import DiscoveryRanker
from chirp_feed.services.pagination import Pagination

FIRST_PAGE = Pagination(page=1, limit=10)


def _names(page) -> list[str]:
    return [user.username for user in page.response]


def test_featured_first_then_newest(db_session, make_user, follow, as_viewer):
    """Featured = [alice, bob], carol follows alice."""
    alice = make_user("alice")
    make_user("bob")
    carol = make_user("carol")
    make_user("dave")
    make_user("erin")
    follow(carol, alice)

    ranker = DiscoveryRanker(db_session, ["alice", "bob"])
    page = ranker.suggest_users(as_viewer(carol), FIRST_PAGE)

    assert _names(page) == ["bob", "erin", "dave"]
    assert page.nb_hits == 3


def test_featured_order_follows_configuration(db_session, make_user):
    make_user("zed")
    make_user("amy")
    ranker = DiscoveryRanker(db_session, ["zed", "amy"])
    assert _names(ranker.suggest_users(None, FIRST_PAGE)) == ["zed", "amy"]


def test_viewer_following_all_featured_gets_no_tier_one(
    db_session, make_user, follow, as_viewer
):
    alice = make_user("alice")
    bob = make_user("bob")
    viewer = make_user("viewer")
    make_user("other")
    follow(viewer, alice)
    follow(viewer, bob)

    page = DiscoveryRanker(db_session, ["alice", "bob"]).suggest_users(
        as_viewer(viewer), FIRST_PAGE
    )
    assert _names(page) == ["other"]


def test_only_tier_two_is_paginated(db_session, make_user):
    make_user("alice")
    make_user("bob")
    others = [make_user(f"user{i}") for i in range(5)]
    newest_first = [user.username for user in reversed(others)]
    ranker = DiscoveryRanker(db_session, ["alice", "bob"])

    page_one = ranker.suggest_users(None, Pagination(page=1, limit=2))
    page_three = ranker.suggest_users(None, Pagination(page=3, limit=2))

    assert _names(page_one) == ["alice", "bob", *newest_first[:2]]
    assert page_one.nb_hits == 4
    assert _names(page_three) == ["alice", "bob", newest_first[4]]
    assert page_three.nb_hits == 3


def test_anonymous_viewer_has_no_exclusions(db_session, make_user, follow):
    alice = make_user("alice")
    bob = make_user("bob")
    follow(alice, bob)

    page = DiscoveryRanker(db_session, []).suggest_users(None, FIRST_PAGE)
    assert _names(page) == ["bob", "alice"]


def test_authenticated_viewer_never_sees_self(db_session, make_user, as_viewer):
    me = make_user("me")
    make_user("you")

    for featured in ([], ["me"]):
        page = DiscoveryRanker(db_session, featured).suggest_users(as_viewer(me), FIRST_PAGE)
        assert "me" not in _names(page)


def test_missing_featured_accounts_are_skipped(db_session, make_user):
    make_user("present")
    page = DiscoveryRanker(db_session, ["absent", "present"]).suggest_users(None, FIRST_PAGE)
    assert _names(page) == ["present"]


def test_records_are_public_profiles(db_session, make_user):
    make_user("alice")
    page = DiscoveryRanker(db_session, []).suggest_users(None, FIRST_PAGE)
    assert "password_hash" not in page.response[0].model_dump()
