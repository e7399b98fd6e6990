"""
Configuration settings for the application.
"""
import logging
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with default values.
    Values can be overridden by environment variables.
    """
    PROJECT_NAME: str = "Operations GraphQL API"

    # GraphQL settings
    GRAPHQL_PATH: str = "/graphql"
    GRAPHIQL: bool = True

    # CORS settings
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:4200", "http://localhost:3000"]

    # MongoDB settings
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "praktikum"

    # Logging settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Read once at process start
settings = Settings()


def log_config_info(config: Settings) -> None:
    """Log configuration information at startup."""
    logger.info(f"Project Name: {config.PROJECT_NAME}")
    logger.info(f"MongoDB URL: {config.MONGODB_URL}")
    logger.info(f"MongoDB Database: {config.MONGODB_DB}")
    logger.info(f"GraphQL Path: {config.GRAPHQL_PATH} (GraphiQL: {config.GRAPHIQL})")
    logger.info(f"CORS Origins: {config.BACKEND_CORS_ORIGINS}")
    logger.info(f"Log Level: {config.LOG_LEVEL}")
