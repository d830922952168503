"""
Database definitions and collection constants.
"""
from recipe_api.database.databases import recipes_db

__all__ = ["recipes_db"]
