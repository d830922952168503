"""
Authentication router for login.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_api.core.responses import success_response
from recipe_api.database.connections import get_database
from recipe_api.schemas.auth import LoginRequest
from recipe_api.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


def get_auth_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)


@router.post(
    "/login",
    summary="Login and get access token",
)
async def login(
    body: Optional[LoginRequest] = None,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Pass the token to protected endpoints as `Authorization: Bearer <token>`.
    """
    result = await auth_service.login(body or LoginRequest())
    return success_response(
        data=result.user.model_dump(),
        accessToken=result.access_token,
    )
