"""
Chunking and retrieval configuration.

Default window sizes for document chunking and the number of chunks
handed to the AI step per query.

Dependencies: pydantic, pydantic_settings
System role: Text processing defaults
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChunkingSettings(BaseSettings):
    """Chunk window and top-K defaults."""

    model_config = SettingsConfigDict(
        env_prefix="CHUNKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=500,
        gt=0,
        description="Maximum words per chunk",
    )
    overlap: int = Field(
        default=50,
        ge=0,
        description="Trailing words repeated at the start of the next chunk",
    )
    top_k: int = Field(
        default=5,
        ge=1,
        description="Maximum chunks returned for a query",
    )

    @model_validator(mode="after")
    def check_overlap_below_chunk_size(self) -> "ChunkingSettings":
        """Overlap must leave the sliding window room to advance."""
        if self.overlap >= self.chunk_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self
