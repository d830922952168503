"""
Pydantic models for database documents.
"""
from recipe_api.models.recipe import Recipe
from recipe_api.models.user import User

__all__ = ["Recipe", "User"]
