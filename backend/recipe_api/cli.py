"""
Management command for seeding users.

Users are never created over HTTP; an operator adds them with:

    recipe-api-create-user admin --password okay

Environment Variables:
    MONGO_URI: MongoDB connection string
    MONGO_DB_NAME: Database name (default: recipes_db)
    LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import asyncio
import getpass
import logging
import sys
from typing import Optional

from pymongo.errors import DuplicateKeyError

from recipe_api.config import get_settings
from recipe_api.core.security import hash_password
from recipe_api.database.connections import create_mongo_client
from recipe_api.database.databases.recipes_db import Collections, create_indexes
from recipe_api.logging_config import configure_logging
from recipe_api.models.user import User

logger = logging.getLogger("recipe_api.cli")


async def create_user(db, username: str, password: str) -> str:
    """
    Insert a user with a bcrypt-hashed password.

    Returns:
        The new user's id as a string

    Raises:
        DuplicateKeyError: If the username is taken
    """
    await create_indexes(db)
    user = User(username=username, password_hash=hash_password(password))
    result = await db[Collections.USERS].insert_one(
        user.model_dump(exclude={"id"})
    )
    return str(result.inserted_id)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create a Recipe API user")
    parser.add_argument("username", help="Unique username")
    parser.add_argument(
        "--password",
        help="Password (prompted for when omitted)",
    )
    return parser


async def _run(username: str, password: str) -> int:
    settings = get_settings()
    client = create_mongo_client(settings)
    try:
        user_id = await create_user(client[settings.mongo_db_name], username, password)
    except DuplicateKeyError:
        logger.error(f"User {username!r} already exists")
        return 1
    finally:
        client.close()

    logger.info(f"Created user {username!r} with id {user_id}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for ``recipe-api-create-user``."""
    args = build_arg_parser().parse_args(argv)
    configure_logging(get_settings().log_level)

    password = args.password or getpass.getpass("Password: ")
    if not args.username or not password:
        logger.error("username or password can not be empty")
        return 2

    return asyncio.run(_run(args.username, password))


if __name__ == "__main__":
    sys.exit(main())
