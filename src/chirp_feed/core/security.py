"""Bearer token helpers for identifying the viewer of a request."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import jwt

from chirp_feed.core.settings import Settings, settings


@dataclass(frozen=True)
class Viewer:
    """Authenticated identity attached to an inbound request."""

    user_id: int
    username: str


def create_access_token(
    user_id: int,
    username: str,
    *,
    expires_delta: timedelta | None = None,
    config: Settings | None = None,
) -> str:
    """Return a signed JWT whose subject is the user's id.

    Args:
        user_id: Primary key of the user the token identifies.
        username: Username embedded as a claim for discovery filtering.
        expires_delta: Optional lifetime override.
        config: Settings to sign with; defaults to process settings.
    """
    config = config or settings
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=config.access_token_expire_minutes))
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int(expire.timestamp()),
    }
    return jwt.encode(claims, config.secret_key, algorithm=config.jwt_algorithm)


def decode_access_token(token: str, *, config: Settings | None = None) -> dict[str, Any]:
    """Decode and verify a token, raising ``jose.JWTError`` when invalid."""
    config = config or settings
    return jwt.decode(token, config.secret_key, algorithms=[config.jwt_algorithm])
