"""
MongoDB connection management.

The client is opened once per process by the application lifespan and kept
on ``app.state``; handlers receive the database through ``get_database``.
"""
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from recipe_api.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client from settings."""
    return AsyncIOMotorClient(settings.mongo_uri)


def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """Dependency returning the process-wide MongoDB client."""
    return request.app.state.mongo_client


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Dependency returning the application database."""
    return request.app.state.mongo_client[request.app.state.db_name]
