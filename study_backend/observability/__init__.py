"""
Observability module.

Provides logging configuration, structured logging helpers and
correlation ID tracking.
"""

from study_backend.observability.correlation import get_correlation_id, set_correlation_id
from study_backend.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
