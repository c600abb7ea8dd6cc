"""
Chunk API endpoints.

Routes:
- POST /chunks - Split extracted document text into chunks
- POST /chunks/search - Rank stored chunks against a query

Dependencies: fastapi, study_backend.application.services, study_backend.models
System role: Chunking and retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from study_backend.api.deps import get_chunking_service
from study_backend.application.services import ChunkingService
from study_backend.core.exceptions import ValidationError
from study_backend.core.text_processing import build_context
from study_backend.models.chunk import (
    ChunkTextRequest,
    ChunkTextResponse,
    SearchChunksRequest,
    SearchChunksResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chunks", tags=["chunks"])


@router.post("", response_model=ChunkTextResponse)
def create_chunks(
    request: ChunkTextRequest,
    service: ChunkingService = Depends(get_chunking_service),
) -> ChunkTextResponse:
    """
    Split extracted document text into overlapping word-bounded chunks.

    The caller stores the returned chunks under the document, keyed by
    chunk_index.

    Args:
        request: Text and optional window parameters
        service: Injected ChunkingService

    Returns:
        ChunkTextResponse: Chunks and their count

    Raises:
        HTTPException(400): Invalid chunk_size/overlap combination
    """
    try:
        chunks = service.chunk_document(
            request.text,
            chunk_size=request.chunk_size,
            overlap=request.overlap,
        )
    except ValidationError as e:
        logger.warning("Rejected chunking request", extra={"error_msg": str(e)})
        raise HTTPException(status_code=400, detail=str(e))

    return ChunkTextResponse(chunks=chunks, total=len(chunks))


@router.post("/search", response_model=SearchChunksResponse)
def search_chunks(
    request: SearchChunksRequest,
    service: ChunkingService = Depends(get_chunking_service),
) -> SearchChunksResponse:
    """
    Select the chunks most relevant to a query.

    Args:
        request: Stored chunks, query and optional top_k
        service: Injected ChunkingService

    Returns:
        SearchChunksResponse: Ranked chunks and the joined AI context

    Raises:
        HTTPException(400): Invalid top_k
    """
    try:
        results = service.search_chunks(request.chunks, request.query, top_k=request.top_k)
    except ValidationError as e:
        logger.warning("Rejected chunk search request", extra={"error_msg": str(e)})
        raise HTTPException(status_code=400, detail=str(e))

    return SearchChunksResponse(
        results=results,
        total=len(results),
        context=build_context(results),
    )
