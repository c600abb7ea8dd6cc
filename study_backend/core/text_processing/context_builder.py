"""
Context assembly for AI completion prompts.

Dependencies: None
System role: Joins ranked chunks into the context block sent to the LLM
"""

from collections.abc import Sequence

from .models import Chunk

CONTEXT_SEPARATOR = "\n\n"


def build_context(chunks: Sequence[Chunk], separator: str = CONTEXT_SEPARATOR) -> str:
    """Concatenate chunk contents in the given order."""
    return separator.join(chunk.content for chunk in chunks)
