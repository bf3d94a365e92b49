"""Tests for cosine similarity ranking."""

from datetime import UTC, datetime

import pytest

from secondbrain.exceptions import DimensionMismatchError, NoCandidates
from secondbrain.models import Chunk
from secondbrain.ranker import EPSILON, SimilarityRanker, cosine_similarity

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def make_chunk(chunk_id: int, embedding: list[float]) -> Chunk:
    return Chunk(
        id=chunk_id,
        user_id=1,
        source_id=1,
        content=f"chunk {chunk_id}",
        embedding=embedding,
        created_at=NOW,
        content_time=NOW,
    )


class TestCosineSimilarity:
    def test_identical_vectors(self):
        assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)

    def test_opposite_vectors(self):
        assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_magnitude_independent(self):
        assert cosine_similarity([1.0, 1.0], [5.0, 5.0]) == pytest.approx(1.0)

    def test_zero_vector_scores_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ([0.3, -0.7, 2.0], [1.5, 0.2, -0.1]),
            ([1e-3, 1e-3], [1e3, -1e3]),
            ([4.0, 4.0, 4.0], [4.0, 4.0, 4.0]),
            ([-2.0, 9.0], [2.0, -9.0]),
        ],
    )
    def test_bounds(self, a, b):
        assert -1.0 <= cosine_similarity(a, b) <= 1.0

    def test_epsilon_in_denominator(self):
        # |a|=|b|=1, so the score is exactly 1 / (1 + EPSILON)
        assert cosine_similarity([1.0], [1.0]) == 1.0 / (1.0 + EPSILON)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0])


class TestSimilarityRanker:
    def test_default_k(self):
        assert SimilarityRanker().default_k == 5

    def test_orders_by_descending_score(self):
        candidates = [
            make_chunk(1, [0.0, 1.0]),
            make_chunk(2, [1.0, 0.0]),
            make_chunk(3, [1.0, 1.0]),
        ]

        ranked = SimilarityRanker().rank([1.0, 0.0], candidates)

        assert [r.chunk.id for r in ranked] == [2, 3, 1]
        assert ranked[0].score == pytest.approx(1.0)
        assert ranked[1].score == pytest.approx(2**-0.5)

    def test_keeps_at_most_k(self):
        candidates = [make_chunk(i, [1.0, float(i)]) for i in range(1, 11)]

        assert len(SimilarityRanker().rank([1.0, 0.0], candidates)) == 5
        assert len(SimilarityRanker().rank([1.0, 0.0], candidates, k=3)) == 3
        assert len(SimilarityRanker(default_k=20).rank([1.0, 0.0], candidates)) == 10

    def test_ties_keep_insertion_order(self):
        candidates = [
            make_chunk(7, [1.0, 0.0]),
            make_chunk(3, [0.0, 1.0]),
            make_chunk(5, [1.0, 0.0]),
            make_chunk(1, [1.0, 0.0]),
        ]

        ranked = SimilarityRanker().rank([1.0, 0.0], candidates)

        assert [r.chunk.id for r in ranked] == [7, 5, 1, 3]

    def test_repeated_calls_are_identical(self):
        candidates = [make_chunk(i, [float(i % 3), 1.0, float(i % 2)]) for i in range(1, 9)]
        ranker = SimilarityRanker()

        first = ranker.rank([1.0, 0.5, 0.0], candidates)
        second = ranker.rank([1.0, 0.5, 0.0], candidates)

        assert first == second

    def test_scores_match_cosine_similarity(self):
        candidates = [make_chunk(1, [0.2, 0.9, -0.4]), make_chunk(2, [1.0, 0.1, 0.3])]
        query = [0.5, 0.5, 0.5]

        scores = SimilarityRanker().score(query, candidates)

        for chunk, score in zip(candidates, scores, strict=True):
            assert score == pytest.approx(cosine_similarity(query, chunk.embedding))

    def test_empty_candidates(self):
        with pytest.raises(NoCandidates):
            SimilarityRanker().rank([1.0, 0.0], [])

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            SimilarityRanker().rank([1.0], [make_chunk(1, [1.0])], k=0)
        with pytest.raises(ValueError):
            SimilarityRanker(default_k=0)

    def test_candidate_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            SimilarityRanker().rank([1.0, 0.0], [make_chunk(1, [1.0, 0.0, 0.0])])
