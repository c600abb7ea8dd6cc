"""API routers."""

from .chunks import router as chunks_router
from .health import router as health_router

__all__ = ["chunks_router", "health_router"]
