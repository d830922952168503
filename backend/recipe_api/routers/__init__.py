"""
API Routers module.
"""
from recipe_api.routers import auth, health, recipes

__all__ = ["auth", "health", "recipes"]
