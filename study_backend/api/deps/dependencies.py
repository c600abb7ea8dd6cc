"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, study_backend.configs, study_backend.application
System role: DI container for service injection
"""

from fastapi import Depends

from study_backend.application.services import ChunkingService
from study_backend.configs import Settings, get_settings


def get_settings_dependency() -> Settings:
    """Provide cached application settings."""
    return get_settings()


def get_chunking_service(
    settings: Settings = Depends(get_settings_dependency),
) -> ChunkingService:
    """
    Provide a ChunkingService bound to the configured defaults.

    Args:
        settings: Injected application settings

    Returns:
        ChunkingService: Stateless service instance
    """
    return ChunkingService(settings=settings.chunking)
