"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError

from recipe_api.config import get_settings
from recipe_api.core.exceptions import InvalidTokenError
from recipe_api.schemas.auth import TokenIdentity

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    A password bcrypt refuses to process (e.g. one containing NUL bytes)
    cannot match any stored hash and returns False.

    Raises:
        ValueError: If ``hashed_password`` is not a recognizable bcrypt hash
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        return False


def dummy_verify() -> None:
    """Run a bcrypt verify against a throwaway hash when there is no user."""
    pwd_context.dummy_verify()


def create_access_token(
    user_id: str,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: Unique user identifier, stored as ``sub``
        username: Username at the time of login
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "username": username,
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenIdentity:
    """
    Decode and validate a JWT token.

    Raises:
        InvalidTokenError: If the token is malformed, expired, badly signed
            or carries no subject
    """
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token has no subject")

    return TokenIdentity(user_id=user_id, username=payload.get("username"))
