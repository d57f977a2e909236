"""Tests for API dependencies module."""

from datetime import timedelta

import pytest
from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from chirp_feed.api.v1.dependencies import (
    get_current_viewer,
    get_optional_viewer,
    get_pagination,
)
from chirp_feed.core.security import Viewer, create_access_token


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetOptionalViewer:
    """Test the get_optional_viewer dependency function."""

    def test_anonymous_request(self, db_session, test_settings):
        assert get_optional_viewer(None, db_session, test_settings) is None

    def test_valid_token(self, db_session, test_settings, make_user):
        alice = make_user("alice")
        token = create_access_token(alice.id, alice.username, config=test_settings)

        viewer = get_optional_viewer(_credentials(token), db_session, test_settings)
        assert viewer == Viewer(user_id=alice.id, username="alice")

    def test_invalid_token(self, db_session, test_settings):
        with pytest.raises(HTTPException) as exc_info:
            get_optional_viewer(_credentials("invalid_token"), db_session, test_settings)
        assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED
        assert "Could not validate credentials" in exc_info.value.detail

    def test_expired_token(self, db_session, test_settings, make_user):
        alice = make_user("alice")
        token = create_access_token(
            alice.id, alice.username, expires_delta=timedelta(minutes=-1), config=test_settings
        )
        with pytest.raises(HTTPException) as exc_info:
            get_optional_viewer(_credentials(token), db_session, test_settings)
        assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED

    def test_non_numeric_subject(self, db_session, test_settings):
        token = jwt.encode(
            {"sub": "not-an-id"}, test_settings.secret_key, algorithm=test_settings.jwt_algorithm
        )
        with pytest.raises(HTTPException) as exc_info:
            get_optional_viewer(_credentials(token), db_session, test_settings)
        assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED

    def test_unknown_user(self, db_session, test_settings):
        token = create_access_token(999999, "ghost", config=test_settings)
        with pytest.raises(HTTPException) as exc_info:
            get_optional_viewer(_credentials(token), db_session, test_settings)
        assert exc_info.value.detail == "User not found"


def test_get_current_viewer_rejects_anonymous():
    with pytest.raises(HTTPException) as exc_info:
        get_current_viewer(None)
    assert exc_info.value.status_code == status.HTTP_401_UNAUTHORIZED

    viewer = Viewer(user_id=1, username="alice")
    assert get_current_viewer(viewer) is viewer


def test_get_pagination_uses_configured_defaults(test_settings):
    configured = test_settings.model_copy(update={"default_limit": 25})
    pagination = get_pagination(configured, page="2", limit="abc")
    assert (pagination.page, pagination.limit) == (2, 25)
