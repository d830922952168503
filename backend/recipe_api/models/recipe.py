"""
Recipe model for the recipes collection.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Recipe(BaseModel):
    """
    Recipe document model for MongoDB recipes collection.

    Serialized with ``by_alias=True`` so clients see the identifier as ``_id``.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Recipe name")
    difficulty: int = Field(..., description="Difficulty rating")
    vegetarian: bool = Field(..., description="Whether the recipe is vegetarian")

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Recipe":
        """Build a model from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls.model_validate(doc)

    def to_public(self) -> dict[str, Any]:
        """Dictionary returned in response envelopes."""
        return self.model_dump(by_alias=True)
