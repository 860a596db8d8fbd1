"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "Database Health Check"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"

    # Database connection
    DB_HOST: str = "localhost"
    DB_PORT: int = Field(default=5432, ge=1, le=65535)
    DB_DATABASE: str = "testdb"
    DB_USERNAME: str = "postgres"
    DB_PASSWORD: str = "postgres"

    # Explicit SQLAlchemy URL; overrides the DB_* connection fields when set
    DATABASE_URL: Optional[str] = None

    # Connection pool
    DB_POOL_INITIAL_SIZE: int = Field(default=10, ge=0)
    DB_POOL_MAX_SIZE: int = Field(default=20, ge=1)
    DB_POOL_MAX_IDLE_TIME: int = Field(default=30, ge=0)  # minutes
    DB_POOL_PREWARM: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = Field(default=8080, ge=1, le=65535)

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
