"""
Recipes router for recipe CRUD.

Reads are public; create, update and delete require a bearer token.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from recipe_api.core.responses import success_response
from recipe_api.database.connections import get_database
from recipe_api.dependencies.auth import CurrentIdentity
from recipe_api.schemas.recipe import RecipeCreate, RecipeUpdate
from recipe_api.services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])


def get_recipe_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> RecipeService:
    """Dependency to get RecipeService instance."""
    return RecipeService(db)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create recipe",
)
async def create_recipe(
    identity: CurrentIdentity,
    body: RecipeCreate,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """
    Create a new recipe.

    - **name**: Recipe name (required)
    - **difficulty**: Integer difficulty rating
    - **vegetarian**: Vegetarian flag
    """
    recipe = await recipe_service.create_recipe(body)
    return success_response(data=recipe.to_public(), status_code=status.HTTP_201_CREATED)


@router.get(
    "",
    summary="List recipes",
)
async def list_recipes(
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """List all recipes."""
    recipes = await recipe_service.list_recipes()
    return success_response(data=[recipe.to_public() for recipe in recipes])


@router.get(
    "/{recipe_id}",
    summary="Get recipe",
)
async def get_recipe(
    recipe_id: str,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """Get a single recipe by id. Unknown ids return 404."""
    recipe = await recipe_service.get_recipe(recipe_id)
    return success_response(data=recipe.to_public())


@router.patch(
    "/{recipe_id}",
    summary="Update recipe",
)
async def update_recipe(
    recipe_id: str,
    identity: CurrentIdentity,
    body: RecipeUpdate,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """Update the provided recipe fields."""
    recipe = await recipe_service.update_recipe(recipe_id, body)
    return success_response(data=recipe.to_public())


@router.delete(
    "/{recipe_id}",
    summary="Delete recipe",
)
async def delete_recipe(
    recipe_id: str,
    identity: CurrentIdentity,
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    """
    Delete a recipe.

    **Warning**: This action cannot be undone. Deleting the same id twice
    returns 404 the second time.
    """
    await recipe_service.delete_recipe(recipe_id)
    return success_response(message="Recipe successfully deleted")
