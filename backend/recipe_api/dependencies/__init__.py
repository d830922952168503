"""
Dependencies for dependency injection in routes.
"""
from recipe_api.dependencies.auth import CurrentIdentity, get_current_identity

__all__ = ["CurrentIdentity", "get_current_identity"]
