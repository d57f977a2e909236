"""Smoke tests for the service metadata endpoints."""

from fastapi import status

from chirp_feed.core.settings import settings


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"status": "ok"}


def test_root_describes_api(client) -> None:
    r = client.get("/")
    assert r.status_code == status.HTTP_200_OK
    body = r.json()
    assert body["name"] == settings.app_name
    assert body["docs"] == "/docs"
