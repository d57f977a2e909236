"""Domain exceptions raised by the feed services.

Services raise these instead of ``HTTPException`` so they stay usable outside
a request. The application maps them onto HTTP responses in ``main.py``.
"""

from __future__ import annotations

from fastapi import status


class FeedError(RuntimeError):
    """Base exception for client-visible feed failures.

    Attributes:
        status_code: HTTP status the error is reported with.
        message: Human-readable description returned to the client.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(FeedError):
    """Raised when a requested username or record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(FeedError):
    """Raised for malformed input that cannot be normalized."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationRequiredError(FeedError):
    """Raised when an operation needs a viewer but the request is anonymous."""

    status_code = status.HTTP_401_UNAUTHORIZED
