"""
Database module - MongoDB connection and database definitions.
"""
from recipe_api.database.connections import (
    create_mongo_client,
    get_mongo_client,
    get_database,
)
from recipe_api.database.databases import recipes_db

__all__ = [
    "create_mongo_client",
    "get_mongo_client",
    "get_database",
    "recipes_db",
]
