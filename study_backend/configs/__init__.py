"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from study_backend.configs.chunking import ChunkingSettings
from study_backend.configs.settings import Settings, get_settings

__all__ = ["ChunkingSettings", "Settings", "get_settings"]
