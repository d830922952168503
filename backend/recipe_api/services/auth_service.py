"""
Authentication service for login.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from recipe_api.core.exceptions import (
    AuthenticationError,
    PersistenceError,
    ValidationError,
)
from recipe_api.core.security import (
    create_access_token,
    dummy_verify,
    verify_password,
)
from recipe_api.database.databases import recipes_db
from recipe_api.schemas.auth import LoginRequest, LoginResult, LoginUser

logger = logging.getLogger(__name__)

EMPTY_CREDENTIALS_MESSAGE = "username or password can not be empty"
INVALID_CREDENTIALS_MESSAGE = "Incorrect username or password"
LOGIN_FAILED_MESSAGE = "login failed."


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.users_collection = db[recipes_db.Collections.USERS]

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Authenticate a user and issue a JWT token.

        Unknown usernames and wrong passwords fail with the same message so
        callers cannot tell which one was wrong.

        Raises:
            ValidationError: If username or password is missing or empty
            AuthenticationError: If the credentials do not match a user
            PersistenceError: If the lookup or the password check fails
        """
        if not request.username or not request.password:
            raise ValidationError(EMPTY_CREDENTIALS_MESSAGE)

        try:
            user_doc = await self.users_collection.find_one({"username": request.username})
            if user_doc is None:
                dummy_verify()
                password_ok = False
            else:
                password_ok = verify_password(request.password, user_doc["password_hash"])
        except (PyMongoError, KeyError, ValueError) as e:
            logger.exception("Login lookup failed for %r", request.username)
            raise PersistenceError(LOGIN_FAILED_MESSAGE) from e

        if not password_ok:
            logger.info("Rejected login for %r", request.username)
            raise AuthenticationError(
                INVALID_CREDENTIALS_MESSAGE, status_code=400
            )

        user_id = str(user_doc["_id"])
        access_token = create_access_token(user_id=user_id, username=user_doc["username"])

        return LoginResult(
            access_token=access_token,
            user=LoginUser(id=user_id, username=user_doc["username"]),
        )
