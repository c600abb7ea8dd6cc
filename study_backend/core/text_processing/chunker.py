"""
Word-bounded text chunker.

Packs paragraphs into chunks of at most chunk_size words, seeding each new
chunk with the trailing overlap words of the previous one. Paragraphs too
large for one chunk are split with a sliding word window.

Dependencies: re (stdlib)
System role: First stage of query-time retrieval (document text -> chunks)
"""

import re
from collections.abc import Iterator

from .models import Chunk

_LINE_BREAKS = re.compile(r"\r\n?")
_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_SPACES_AROUND_NEWLINE = re.compile(r" *\n *")
_PARAGRAPH_BREAK = re.compile(r"\n+")

PARAGRAPH_SEPARATOR = "\n\n"


def normalize_text(text: str) -> str:
    """
    Normalize line breaks and collapse whitespace.

    Newlines survive so paragraph boundaries can still be detected.

    Args:
        text: Raw extracted document text

    Returns:
        str: Cleaned text
    """
    cleaned = _LINE_BREAKS.sub("\n", text)
    cleaned = _INLINE_WHITESPACE.sub(" ", cleaned)
    cleaned = _SPACES_AROUND_NEWLINE.sub("\n", cleaned)
    return cleaned.strip()


def split_paragraphs(cleaned_text: str) -> list[str]:
    """Split cleaned text on newline runs, dropping empty paragraphs."""
    return [
        paragraph.strip()
        for paragraph in _PARAGRAPH_BREAK.split(cleaned_text)
        if paragraph.strip()
    ]


def sliding_windows(words: list[str], chunk_size: int, overlap: int) -> Iterator[list[str]]:
    """
    Yield windows of chunk_size words advancing by chunk_size - overlap.

    The last window always reaches the final word. A zero step raises
    ValueError from range() and a negative step yields no windows; callers
    must keep overlap below chunk_size.

    Args:
        words: Words to window
        chunk_size: Words per window
        overlap: Words shared by consecutive windows

    Yields:
        list[str]: Words of each window
    """
    for start in range(0, len(words), chunk_size - overlap):
        yield words[start:start + chunk_size]
        if start + chunk_size >= len(words):
            break


def chunk_text(text: str, chunk_size: int = 500, overlap: int = 50) -> list[Chunk]:
    """
    Split document text into overlapping word-bounded chunks.

    Args:
        text: Raw document text
        chunk_size: Maximum words per chunk
        overlap: Trailing words repeated at the start of the next chunk

    Returns:
        list[Chunk]: Chunks with contiguous 0-based chunk_index
    """
    if not text or not text.strip():
        return []

    cleaned_text = normalize_text(text)
    chunks: list[Chunk] = []

    def emit(content: str) -> None:
        chunks.append(Chunk(content=content, chunk_index=len(chunks), page_number=0))

    current_chunk: list[str] = []
    current_word_count = 0

    for paragraph in split_paragraphs(cleaned_text):
        paragraph_words = paragraph.split()
        paragraph_word_count = len(paragraph_words)

        if paragraph_word_count > chunk_size:
            if current_chunk:
                emit(PARAGRAPH_SEPARATOR.join(current_chunk))
                current_chunk = []
                current_word_count = 0

            for window in sliding_windows(paragraph_words, chunk_size, overlap):
                emit(" ".join(window))
            continue

        if current_chunk and current_word_count + paragraph_word_count > chunk_size:
            emit(PARAGRAPH_SEPARATOR.join(current_chunk))

            previous_words = " ".join(current_chunk).split()
            overlap_count = min(overlap, len(previous_words))
            overlap_words = previous_words[len(previous_words) - overlap_count:]

            current_chunk = [" ".join(overlap_words)] if overlap_words else []
            current_chunk.append(paragraph)
            current_word_count = len(overlap_words) + paragraph_word_count
        else:
            current_chunk.append(paragraph)
            current_word_count += paragraph_word_count

    if current_chunk:
        emit(PARAGRAPH_SEPARATOR.join(current_chunk))

    # Also reached when overlap > chunk_size left oversized paragraphs without
    # windows; the negative step yields none here either
    if not chunks and cleaned_text:
        for window in sliding_windows(cleaned_text.split(), chunk_size, overlap):
            emit(" ".join(window))

    return chunks
