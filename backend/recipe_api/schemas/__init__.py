"""
Request and response schemas for API endpoints.
"""
from recipe_api.schemas.auth import (
    LoginRequest,
    LoginResult,
    LoginUser,
    TokenIdentity,
)
from recipe_api.schemas.recipe import RecipeCreate, RecipeUpdate

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResult",
    "LoginUser",
    "TokenIdentity",
    # Recipe
    "RecipeCreate",
    "RecipeUpdate",
]
