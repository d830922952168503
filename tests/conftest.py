"""
Global test fixtures for the Recipe API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A seeded admin user and a token for it
- FastAPI app and async HTTP client bound to the mock database
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from pymongo.errors import PyMongoError

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "okay"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_db(mock_async_mongo_client):
    """Provide the mock application database with indexes like the real app."""
    from recipe_api.config import get_settings
    from recipe_api.database.databases.recipes_db import create_indexes

    db = mock_async_mongo_client[get_settings().mongo_db_name]
    await create_indexes(db)
    yield db


@pytest.fixture
def failing_db():
    """
    A database whose collections raise on every operation.

    Each collection method is an AsyncMock so tests can also assert that
    nothing was called.
    """
    error = PyMongoError("connection refused")
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.find_one_and_update = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)
    collection.find.return_value.to_list = AsyncMock(side_effect=error)

    db = MagicMock()
    db.__getitem__.return_value = collection
    return db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def admin_user(mock_db) -> dict:
    """Insert the admin user and return its public fields."""
    from recipe_api.core.security import hash_password

    result = await mock_db.users.insert_one({
        "username": ADMIN_USERNAME,
        "password_hash": hash_password(ADMIN_PASSWORD),
    })
    return {"id": str(result.inserted_id), "username": ADMIN_USERNAME}


@pytest.fixture
def access_token(admin_user) -> str:
    """A valid JWT for the admin user."""
    from recipe_api.core.security import create_access_token
    return create_access_token(user_id=admin_user["id"], username=admin_user["username"])


@pytest.fixture
def auth_headers(access_token) -> dict:
    """Authorization header carrying the admin token."""
    return {"Authorization": f"Bearer {access_token}"}


# =============================================================================
# Recipe Fixtures
# =============================================================================

@pytest.fixture
def recipe_payload() -> dict:
    """A valid create-recipe body."""
    return {
        "name": "Test Recipe",
        "difficulty": 2,
        "vegetarian": True,
    }


@pytest_asyncio.fixture
async def stored_recipe(mock_db) -> dict:
    """A recipe already present in the database."""
    fields = {"name": "Chicken nuggets", "difficulty": 3, "vegetarian": False}
    result = await mock_db.recipes.insert_one(dict(fields))
    return {"_id": str(result.inserted_id), **fields}


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_async_mongo_client):
    """
    Create the FastAPI app bound to the mock MongoDB client.
    """
    from recipe_api.main import create_app
    return create_app(mongo_client=mock_async_mongo_client)


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def use_failing_db(app, failing_db):
    """Route every handler to ``failing_db`` for the duration of a test."""
    from recipe_api.database.connections import get_database

    app.dependency_overrides[get_database] = lambda: failing_db
    yield failing_db
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def server_error_client(app):
    """
    Async client that returns 500 responses instead of re-raising.

    Starlette re-raises unhandled errors after the handler has produced a
    response; this client lets tests inspect that response.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test"
    ) as ac:
        yield ac
