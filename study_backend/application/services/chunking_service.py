"""
Chunking service orchestrator.

Validates caller parameters, resolves configured defaults and runs the text
processing core for document ingestion and query-time retrieval.

Dependencies: study_backend.core, study_backend.configs, study_backend.observability
System role: Application boundary around chunking and relevance ranking
"""

import logging
from collections.abc import Sequence

from study_backend.configs import ChunkingSettings
from study_backend.core.exceptions import ValidationError
from study_backend.core.text_processing import (
    Chunk,
    RankedChunk,
    build_context,
    chunk_text,
    find_relevant_chunks,
)
from study_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChunkingService:
    """
    Chunking service orchestrator.

    The text processing core trusts its inputs; this service is where
    window parameters and top-K get checked before the core runs.
    """

    def __init__(self, settings: ChunkingSettings | None = None) -> None:
        """
        Initialize chunking service.

        Args:
            settings: Chunking defaults (loaded from environment if None)
        """
        self.settings = settings or ChunkingSettings()

    def chunk_document(
        self,
        text: str,
        chunk_size: int | None = None,
        overlap: int | None = None,
    ) -> list[Chunk]:
        """
        Split extracted document text into chunks.

        Args:
            text: Extracted document text
            chunk_size: Maximum words per chunk (settings default if None)
            overlap: Words carried into the next chunk (settings default if None)

        Returns:
            list[Chunk]: Chunks ready to be stored under the document

        Raises:
            ValidationError: When chunk_size/overlap cannot form a valid window
        """
        chunk_size = self.settings.chunk_size if chunk_size is None else chunk_size
        overlap = self.settings.overlap if overlap is None else overlap
        self._validate_window(chunk_size, overlap)

        chunks = chunk_text(text, chunk_size=chunk_size, overlap=overlap)

        log_with_context(
            logger,
            logging.INFO,
            "Document text chunked",
            chunk_count=len(chunks),
            chunk_size=chunk_size,
            overlap=overlap,
            text_length=len(text),
        )
        return chunks

    def search_chunks(
        self,
        chunks: Sequence[Chunk],
        query: str,
        top_k: int | None = None,
    ) -> list[RankedChunk]:
        """
        Rank chunks against a query and keep the best top_k.

        Args:
            chunks: Stored chunks of the document(s) being queried
            query: User query
            top_k: Maximum chunks returned (settings default if None)

        Returns:
            list[RankedChunk]: Ranked chunks, best first

        Raises:
            ValidationError: When top_k is below 1
        """
        top_k = self.settings.top_k if top_k is None else top_k
        if top_k < 1:
            raise ValidationError("top_k must be at least 1", field="top_k", details={"value": top_k})

        results = find_relevant_chunks(chunks, query, top_k=top_k)

        log_with_context(
            logger,
            logging.INFO,
            "Chunks ranked for query",
            candidate_count=len(chunks),
            result_count=len(results),
            top_k=top_k,
            query=query,
        )
        return results

    def build_context(
        self,
        chunks: Sequence[Chunk],
        query: str,
        top_k: int | None = None,
    ) -> str:
        """
        Build the AI prompt context for a query.

        Args:
            chunks: Stored chunks of the document(s) being queried
            query: User query
            top_k: Maximum chunks included (settings default if None)

        Returns:
            str: Ranked chunk contents joined by blank lines
        """
        return build_context(self.search_chunks(chunks, query, top_k=top_k))

    @staticmethod
    def _validate_window(chunk_size: int, overlap: int) -> None:
        if chunk_size <= 0:
            raise ValidationError(
                "chunk_size must be positive",
                field="chunk_size",
                details={"value": chunk_size},
            )
        if overlap < 0:
            raise ValidationError(
                "overlap must not be negative",
                field="overlap",
                details={"value": overlap},
            )
        if overlap >= chunk_size:
            raise ValidationError(
                "overlap must be smaller than chunk_size",
                field="overlap",
                details={"overlap": overlap, "chunk_size": chunk_size},
            )
