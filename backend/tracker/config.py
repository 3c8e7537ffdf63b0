from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    APP_NAME: str = "Equipment Management Dashboard"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
    ]

    # Dashboard
    RECENT_ACTIVITY_LIMIT: int = 5

    # Load the demo equipment/maintenance set at startup
    SEED_DEMO_DATA: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
