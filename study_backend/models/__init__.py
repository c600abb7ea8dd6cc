"""API request/response schemas."""

from .chunk import (
    ChunkTextRequest,
    ChunkTextResponse,
    SearchChunksRequest,
    SearchChunksResponse,
)
from .common import HealthResponse

__all__ = [
    "ChunkTextRequest",
    "ChunkTextResponse",
    "SearchChunksRequest",
    "SearchChunksResponse",
    "HealthResponse",
]
