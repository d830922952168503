"""
Application error kinds.

Each error carries the HTTP status and the client-safe message that the
exception handlers put into the response envelope.
"""
from fastapi import status


class APIError(Exception):
    """Base class for errors reported to the client as an envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(APIError):
    """Request input is missing or malformed."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class AuthenticationError(APIError):
    """Bad credentials or missing/invalid bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials"


class NotFoundError(APIError):
    """Requested resource does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    message = "Resource not found"


class PersistenceError(APIError):
    """The document store failed while serving the request."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Database operation failed"


class InvalidTokenError(Exception):
    """JWT signature is wrong, the token expired, or it is malformed."""
