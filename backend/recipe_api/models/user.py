"""
User model for the users collection.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    User document model for MongoDB users collection.

    Users are created by the ``recipe-api-create-user`` command, never
    through the HTTP API.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., min_length=1, description="Unique username")
    password_hash: str = Field(..., description="Bcrypt hashed password")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )
