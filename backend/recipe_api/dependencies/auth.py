"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recipe_api.config import get_settings
from recipe_api.core.exceptions import AuthenticationError, InvalidTokenError
from recipe_api.core.security import decode_token
from recipe_api.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT from POST /login")


async def get_current_identity(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> TokenIdentity:
    """
    Dependency resolving the caller from ``Authorization: Bearer <token>``.

    The identity is also stored on ``request.state.identity``.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid,
            with the status configured by ``auth_failure_status_code``
    """
    failure_status = get_settings().auth_failure_status_code

    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token is missing", status_code=failure_status)

    try:
        identity = decode_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token on %s: %s", request.url.path, e)
        raise AuthenticationError("Invalid or expired token", status_code=failure_status)

    request.state.identity = identity
    return identity


# Type alias for cleaner route signatures
CurrentIdentity = Annotated[TokenIdentity, Depends(get_current_identity)]
