"""Application configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache

from photo_delivery.validators.reference_data import DEFAULT_MAX_FILE_SIZE_MB


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation defaults for API requests that don't set their own
    MAX_FILE_SIZE_MB: float = Field(default=DEFAULT_MAX_FILE_SIZE_MB, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
