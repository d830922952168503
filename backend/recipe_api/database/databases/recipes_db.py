"""
Recipes database configuration.
Stores user accounts and recipe documents.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase


class Collections:
    """Collection names in the recipes database."""
    USERS = "users"
    RECIPES = "recipes"


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the recipes database collections."""
    await db[Collections.USERS].create_index("username", unique=True)
