"""
Tests for lexical relevance ranking.

Covers query tokenization, substring scoring, the no-match fallback,
stable ordering and top-K truncation.
"""

import pytest

from study_backend.core.text_processing import (
    STOP_WORDS,
    Chunk,
    RankedChunk,
    find_relevant_chunks,
    score_content,
    tokenize_query,
)


def make_chunks(*contents: str) -> list[Chunk]:
    return [Chunk(content=content, chunk_index=i) for i, content in enumerate(contents)]


@pytest.fixture
def biology_chunks() -> list[Chunk]:
    """Provide chunks from a short biology study document."""
    return make_chunks(
        "Plants use chlorophyll to capture light.",
        "Mitochondria produce energy. Mitochondria are organelles.",
        "The cell membrane controls what enters the cell.",
    )


class TestTokenizeQuery:
    """Tests for query tokenization."""

    def test_drops_stop_words_and_short_tokens(self) -> None:
        assert tokenize_query("Tell me about the Photosynthesis process") == [
            "photosynthesis",
            "process",
        ]

    def test_query_of_only_short_tokens_is_empty(self) -> None:
        assert tokenize_query("AI in ML") == []

    def test_stop_word_set_is_closed(self) -> None:
        assert isinstance(STOP_WORDS, frozenset)
        assert {"stated", "text", "does", "about"} <= STOP_WORDS
        assert "capital" not in STOP_WORDS


class TestScoreContent:
    """Tests for substring occurrence scoring."""

    def test_counts_case_insensitively(self) -> None:
        assert score_content("BIOLOGY biology Biology", ["biology"]) == 3

    def test_matches_inside_longer_words(self) -> None:
        assert score_content("The capital is a cap", ["cap"]) == 2

    def test_tokens_are_literal_not_patterns(self) -> None:
        assert score_content("I like c++ and C++.", ["c++", "programming"]) == 2


class TestFindRelevantChunks:
    """Tests for find_relevant_chunks."""

    def test_empty_query_returns_nothing(self, biology_chunks: list[Chunk]) -> None:
        assert find_relevant_chunks(biology_chunks, "") == []
        assert find_relevant_chunks(biology_chunks, None) == []

    def test_no_chunks_returns_nothing(self) -> None:
        assert find_relevant_chunks([], "anything") == []

    def test_stop_word_query_returns_leading_chunks_unranked(
        self, biology_chunks: list[Chunk]
    ) -> None:
        results = find_relevant_chunks(biology_chunks, "what is the", top_k=2)

        assert [chunk.chunk_index for chunk in results] == [0, 1]
        assert all(chunk.score == 0 for chunk in results)

    def test_single_matching_chunk_ranks_first(self, biology_chunks: list[Chunk]) -> None:
        results = find_relevant_chunks(biology_chunks, "Explain mitochondria")

        assert len(results) == 1
        assert results[0].chunk_index == 1
        assert results[0].score == 2

    def test_orders_by_score_with_stable_ties(self) -> None:
        chunks = make_chunks(
            "one cell",
            "cell after cell",
            "another cell",
        )

        results = find_relevant_chunks(chunks, "cell")

        assert [(chunk.chunk_index, chunk.score) for chunk in results] == [
            (1, 2),
            (0, 1),
            (2, 1),
        ]

    def test_no_match_falls_back_to_all_chunks(self) -> None:
        chunks = make_chunks("Paris is great", "Berlin is cold")

        results = find_relevant_chunks(chunks, "capital of France", top_k=1)

        assert results == [RankedChunk(content="Paris is great", chunk_index=0, score=0)]

    def test_result_length_is_bounded_by_top_k(self) -> None:
        chunks = make_chunks(*[f"topic number {i}" for i in range(10)])

        assert len(find_relevant_chunks(chunks, "topic", top_k=3)) == 3
        assert len(find_relevant_chunks(chunks[:2], "topic", top_k=3)) == 2

    def test_returns_ranked_copies(self, biology_chunks: list[Chunk]) -> None:
        original = [chunk.model_copy() for chunk in biology_chunks]

        results = find_relevant_chunks(biology_chunks, "cell membrane")

        assert biology_chunks == original
        assert all(isinstance(chunk, RankedChunk) for chunk in results)
        assert results[0].content == biology_chunks[2].content
