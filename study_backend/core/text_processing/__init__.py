"""
Text processing for study documents.

Word-bounded chunking, lexical relevance ranking and context assembly.

Exports: Chunk, RankedChunk, chunk_text, find_relevant_chunks, build_context
"""

from .chunker import chunk_text, normalize_text, sliding_windows, split_paragraphs
from .context_builder import build_context
from .models import Chunk, RankedChunk
from .ranker import STOP_WORDS, find_relevant_chunks, score_content, tokenize_query

__all__ = [
    "Chunk",
    "RankedChunk",
    "chunk_text",
    "normalize_text",
    "split_paragraphs",
    "sliding_windows",
    "find_relevant_chunks",
    "tokenize_query",
    "score_content",
    "STOP_WORDS",
    "build_context",
]
