"""
Chunk API schemas.

Request/response schemas for chunking and chunk search endpoints.

Dependencies: pydantic, study_backend.core.text_processing
System role: Chunk API contracts
"""

from pydantic import BaseModel, Field

from study_backend.core.text_processing import Chunk, RankedChunk


class ChunkTextRequest(BaseModel):
    """Request schema for chunking extracted document text."""

    text: str = Field(description="Extracted document text")
    chunk_size: int | None = Field(default=None, description="Maximum words per chunk")
    overlap: int | None = Field(default=None, description="Words repeated at the start of the next chunk")


class ChunkTextResponse(BaseModel):
    """Chunks produced for one document."""

    chunks: list[Chunk]
    total: int


class SearchChunksRequest(BaseModel):
    """Request schema for ranking stored chunks against a query."""

    chunks: list[Chunk] = Field(description="Stored chunks of the document(s) being queried")
    query: str = Field(description="User query")
    top_k: int | None = Field(default=None, description="Maximum chunks returned")


class SearchChunksResponse(BaseModel):
    """Ranked chunks plus the assembled AI prompt context."""

    results: list[RankedChunk]
    total: int
    context: str = Field(description="Result contents joined for the AI completion prompt")
