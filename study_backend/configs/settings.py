"""
Unified application settings.

Aggregates the chunking configuration with application-wide options.
Provides dependency injection factory for FastAPI.

Dependencies: pydantic, pydantic_settings
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from study_backend.configs.chunking import ChunkingSettings


class Settings(BaseSettings):
    """Application settings; nested chunking settings read CHUNKING_* variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(
        default="Study Assistant API",
        description="Title shown in the OpenAPI docs",
    )
    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )

    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once; call get_settings.cache_clear()
    to reload them.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
