"""
Recipe request schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10


class RecipeCreate(BaseModel):
    """Create recipe request."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=200, description="Recipe name")
    difficulty: StrictInt = Field(
        ..., ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY, description="Difficulty rating (1-10)"
    )
    vegetarian: StrictBool = Field(..., description="Whether the recipe is vegetarian")


class RecipeUpdate(BaseModel):
    """Partial update request; only provided fields are changed."""
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=200, description="Recipe name")
    difficulty: Optional[StrictInt] = Field(
        None, ge=MIN_DIFFICULTY, le=MAX_DIFFICULTY, description="Difficulty rating (1-10)"
    )
    vegetarian: Optional[StrictBool] = Field(None, description="Whether the recipe is vegetarian")

    def changes(self) -> dict:
        """Fields the client actually sent with a non-null value."""
        return {
            k: v for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None
        }
