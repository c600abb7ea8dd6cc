"""
Lexical relevance ranking for document chunks.

Scores chunks by literal substring occurrences of query keywords and keeps
the top-K. Never returns an empty result for a non-empty chunk list and a
non-empty query, so the AI step always receives some context.

Dependencies: None (pure domain logic)
System role: Query-time chunk selection before AI completion
"""

from collections.abc import Sequence

from .models import Chunk, RankedChunk

STOP_WORDS = frozenset({
    "what", "is", "the", "of", "as", "in", "a", "an", "and", "or",
    "to", "that", "this", "it", "for", "on", "are", "was", "with", "by",
    "at", "from", "stated", "text", "me", "tell", "about", "does",
})

MIN_TOKEN_LENGTH = 3


def tokenize_query(query: str) -> list[str]:
    """Lowercase, split on whitespace, drop short tokens and stop words."""
    return [
        token
        for token in query.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def score_content(content: str, tokens: Sequence[str]) -> int:
    """
    Count case-insensitive substring occurrences of every token.

    Matches are literal and non-overlapping, so a token also matches inside
    longer words ("cap" counts in "capital").

    Args:
        content: Chunk text
        tokens: Lowercased query tokens

    Returns:
        int: Total occurrence count
    """
    lowered = content.lower()
    return sum(lowered.count(token) for token in tokens)


def find_relevant_chunks(
    chunks: Sequence[Chunk],
    query: str | None,
    top_k: int = 5,
) -> list[RankedChunk]:
    """
    Select the top_k chunks most relevant to a query.

    Args:
        chunks: Chunks of one or more documents
        query: User query
        top_k: Maximum number of chunks returned

    Returns:
        list[RankedChunk]: Chunks ordered by score descending, ties in input order
    """
    if not chunks or not query:
        return []

    tokens = tokenize_query(query)
    if not tokens:
        return [RankedChunk.from_chunk(chunk) for chunk in chunks[:top_k]]

    scored = [
        RankedChunk.from_chunk(chunk, score_content(chunk.content, tokens))
        for chunk in chunks
    ]
    candidates = [chunk for chunk in scored if chunk.score > 0] or scored

    # sorted() stays stable with reverse=True
    return sorted(candidates, key=lambda chunk: chunk.score, reverse=True)[:top_k]
