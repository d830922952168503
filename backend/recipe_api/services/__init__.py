"""
Service layer - business logic over the document store.
"""
from recipe_api.services.auth_service import AuthService
from recipe_api.services.recipe_service import RecipeService

__all__ = ["AuthService", "RecipeService"]
