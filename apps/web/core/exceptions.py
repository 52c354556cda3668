"""API exceptions - mapped to JSON error responses by handles_errors."""

from typing import Any


class APIError(Exception):
    """Base exception for errors surfaced to API callers."""

    status = 400

    def __init__(
        self, message: str, details: list[dict[str, Any]] | None = None
    ) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationError(APIError):
    """Missing or invalid input."""

    status = 400


class AuthError(APIError):
    """Missing, invalid or expired session token."""

    status = 401

    NO_TOKEN = "Not authorized (no token)"
    INVALID_TOKEN = "Not authorized (invalid or expired token)"
