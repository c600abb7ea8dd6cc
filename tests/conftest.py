"""
Shared test fixtures and configuration for entire test suite.

Provides: chunking settings, service instances, API test client
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from study_backend.api.deps import get_chunking_service
from study_backend.application.services import ChunkingService
from study_backend.configs import ChunkingSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def chunking_settings() -> ChunkingSettings:
    """Small windows so tests can reason about word counts by hand."""
    return ChunkingSettings(chunk_size=50, overlap=5, top_k=2)


@pytest.fixture
def chunking_service(chunking_settings: ChunkingSettings) -> ChunkingService:
    """Provide ChunkingService bound to test settings."""
    return ChunkingService(settings=chunking_settings)


@pytest.fixture
def client(chunking_service: ChunkingService):
    """
    Create API test client with the chunking service overridden.

    Yields:
        TestClient: Client against a fresh application instance
    """
    from study_backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_chunking_service] = lambda: chunking_service
    yield TestClient(app)
    app.dependency_overrides.clear()
