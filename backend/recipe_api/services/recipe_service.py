"""
Recipe service for recipe CRUD.

Every driver failure is logged and re-raised as ``PersistenceError`` with a
client-safe message.
"""
import logging
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from recipe_api.core.exceptions import NotFoundError, PersistenceError
from recipe_api.database.databases import recipes_db
from recipe_api.models.recipe import Recipe
from recipe_api.schemas.recipe import RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)

RECIPE_NOT_FOUND_MESSAGE = "Recipe not found"


def _parse_id(recipe_id: str) -> ObjectId:
    """Parse a client identifier; malformed ids can never match a recipe."""
    if not ObjectId.is_valid(recipe_id):
        raise NotFoundError(RECIPE_NOT_FOUND_MESSAGE)
    return ObjectId(recipe_id)


class RecipeService:
    """Service for recipe operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the application database."""
        self.db = db
        self.recipes = db[recipes_db.Collections.RECIPES]

    async def create_recipe(self, request: RecipeCreate) -> Recipe:
        """Insert a new recipe and return it with its generated id."""
        recipe_doc = request.model_dump()
        try:
            result = await self.recipes.insert_one(recipe_doc)
        except PyMongoError as e:
            logger.exception("Failed to insert recipe %r", request.name)
            raise PersistenceError("Failed to save recipes!") from e

        recipe_doc["_id"] = result.inserted_id
        logger.info("Created recipe %s", result.inserted_id)
        return Recipe.from_document(recipe_doc)

    async def list_recipes(self) -> list[Recipe]:
        """Return all recipes."""
        try:
            docs = await self.recipes.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.exception("Failed to list recipes")
            raise PersistenceError("Failed to fetch recipes!") from e

        return [Recipe.from_document(doc) for doc in docs]

    async def get_recipe(self, recipe_id: str) -> Recipe:
        """
        Get a recipe by id.

        Raises:
            NotFoundError: If the id is malformed or unknown
            PersistenceError: If the store fails
        """
        object_id = _parse_id(recipe_id)
        try:
            doc = await self.recipes.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.exception("Failed to fetch recipe %s", recipe_id)
            raise PersistenceError("Failed to fetch recipe!") from e

        if not doc:
            raise NotFoundError(RECIPE_NOT_FOUND_MESSAGE)
        return Recipe.from_document(doc)

    async def update_recipe(self, recipe_id: str, request: RecipeUpdate) -> Recipe:
        """
        Merge the provided fields into an existing recipe.

        An update with no fields returns the current record unchanged.
        """
        update_data = request.changes()

        if not update_data:
            return await self.get_recipe(recipe_id)

        object_id = _parse_id(recipe_id)
        try:
            doc: Optional[dict] = await self.recipes.find_one_and_update(
                {"_id": object_id},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.exception("Failed to update recipe %s", recipe_id)
            raise PersistenceError("Failed to update recipe!") from e

        if not doc:
            raise NotFoundError(RECIPE_NOT_FOUND_MESSAGE)
        return Recipe.from_document(doc)

    async def delete_recipe(self, recipe_id: str) -> None:
        """
        Delete a recipe.

        Deleting an id that no longer exists raises ``NotFoundError``, so a
        repeated delete is reported as 404.
        """
        object_id = _parse_id(recipe_id)
        try:
            result = await self.recipes.delete_one({"_id": object_id})
        except PyMongoError as e:
            logger.exception("Failed to delete recipe %s", recipe_id)
            raise PersistenceError("Failed to delete recipe!") from e

        if result.deleted_count == 0:
            raise NotFoundError(RECIPE_NOT_FOUND_MESSAGE)
        logger.info("Deleted recipe %s", recipe_id)
