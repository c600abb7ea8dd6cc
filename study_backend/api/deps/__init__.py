"""API-specific dependencies."""

from .dependencies import get_chunking_service, get_settings_dependency

__all__ = ["get_chunking_service", "get_settings_dependency"]
