"""Application configuration via environment variables."""
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    APP_NAME: str = "Event Graph"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    CORS_ORIGINS: str = "http://localhost:3000"
    GRAPHQL_PATH: str = "/graphql"
    GRAPHQL_IDE: bool = True
    SEED_ON_STARTUP: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
