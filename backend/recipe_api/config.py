"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "recipes_db"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # Status returned to callers of protected routes without a valid token
    auth_failure_status_code: int = 401

    # Logging
    log_level: str = "INFO"

    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    @field_validator("auth_failure_status_code")
    @classmethod
    def check_auth_failure_status(cls, value: int) -> int:
        if value not in (401, 403):
            raise ValueError("auth_failure_status_code must be 401 or 403")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
