"""
Recipe API - FastAPI Application

Login with username/password for a JWT, then manage recipes.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient

from recipe_api import __version__
from recipe_api.config import get_settings
from recipe_api.core.handlers import register_exception_handlers
from recipe_api.database.connections import create_mongo_client
from recipe_api.database.databases.recipes_db import create_indexes
from recipe_api.logging_config import configure_logging
from recipe_api.routers import auth, health, recipes

logger = logging.getLogger(__name__)


def create_app(mongo_client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        mongo_client: Client to use instead of one built from settings. An
            injected client is not closed on shutdown.
    """
    settings = get_settings()
    owns_client = mongo_client is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Open the MongoDB client
        - Create indexes

        Shutdown:
        - Close the MongoDB client if this app opened it
        """
        logger.info("Starting up Recipe API...")
        if app.state.mongo_client is None:
            app.state.mongo_client = create_mongo_client(settings)

        try:
            await create_indexes(app.state.mongo_client[settings.mongo_db_name])
            logger.info("Database indexes created")
        except Exception:
            logger.warning("Database initialization failed", exc_info=True)

        yield

        logger.info("Shutting down Recipe API...")
        if owns_client and app.state.mongo_client is not None:
            app.state.mongo_client.close()
            app.state.mongo_client = None
            logger.info("Database connection closed")

    app = FastAPI(
        title="Recipe API",
        description="""
## Recipe API

### Authentication
Obtain a token via `POST /login` and send it on protected endpoints:
```
Authorization: Bearer your_jwt_token
```

### Recipes
Reading recipes is public. Creating, updating and deleting require a token.

Every response is an envelope: `{"success": bool, "data": ..., "message": ...}`.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client
    app.state.db_name = settings.mongo_db_name

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(recipes.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Recipe API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


configure_logging(get_settings().log_level)
app = create_app()
