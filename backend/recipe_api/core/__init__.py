"""
Core module - Security, errors and the response envelope.
"""
from recipe_api.core.exceptions import (
    APIError,
    AuthenticationError,
    InvalidTokenError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from recipe_api.core.responses import error_response, success_response
from recipe_api.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    "APIError",
    "AuthenticationError",
    "InvalidTokenError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
    "error_response",
    "success_response",
    "create_access_token",
    "decode_token",
    "hash_password",
    "verify_password",
]
