"""
Chunk domain models for text processing.

Represents word-bounded document chunks and their ranked counterparts.

Dependencies: pydantic
System role: Value types shared by chunker, ranker and API schemas
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Immutable slice of document text with its position in the document."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Chunk text content")
    chunk_index: int = Field(ge=0, description="0-based position in document order")
    page_number: int = Field(default=0, description="Page attribution placeholder (always 0)")


class RankedChunk(Chunk):
    """Chunk decorated with its lexical match score."""

    score: int = Field(default=0, ge=0, description="Total query token occurrences")

    @classmethod
    def from_chunk(cls, chunk: Chunk, score: int = 0) -> "RankedChunk":
        """Copy a chunk into a ranked chunk with the given score."""
        return cls(
            content=chunk.content,
            chunk_index=chunk.chunk_index,
            page_number=chunk.page_number,
            score=score,
        )
