# src/secondbrain/ranker.py
"""Cosine-similarity ranking of chunks against a query vector."""

from collections.abc import Sequence

import numpy as np

from secondbrain.exceptions import DimensionMismatchError, NoCandidates
from secondbrain.models import Chunk, RankedChunk

# Added to the norm product so an all-zero vector scores 0 instead of dividing by zero.
EPSILON = 1e-8

DEFAULT_K = 5


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute cosine similarity between two vectors.

    Formula: (a · b) / (||a|| * ||b|| + EPSILON)

    - 1.0 = same direction
    - 0.0 = orthogonal, or either vector is all zeros
    - -1.0 = opposite direction
    """
    a_arr, b_arr = np.asarray(a, dtype=float), np.asarray(b, dtype=float)
    if a_arr.shape != b_arr.shape:
        raise DimensionMismatchError(a_arr.shape[0], b_arr.shape[0])
    norm_product = np.linalg.norm(a_arr) * np.linalg.norm(b_arr)
    return float(np.dot(a_arr, b_arr) / (norm_product + EPSILON))


class SimilarityRanker:
    """Scores candidate chunks against a query and keeps the top k.

    Ranking is a pure function of its inputs. Chunks with equal scores keep
    their candidate (insertion) order, so repeated calls with the same
    inputs return the same sequence.
    """

    def __init__(self, default_k: int = DEFAULT_K) -> None:
        if default_k <= 0:
            raise ValueError(f"default_k must be positive, got {default_k}")
        self.default_k = default_k

    def score(self, query_vector: Sequence[float], candidates: Sequence[Chunk]) -> list[float]:
        """Score every candidate, in candidate order."""
        query = np.asarray(query_vector, dtype=float)
        for chunk in candidates:
            if len(chunk.embedding) != query.shape[0]:
                raise DimensionMismatchError(query.shape[0], len(chunk.embedding))

        matrix = np.asarray([chunk.embedding for chunk in candidates], dtype=float)
        dots = matrix @ query
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        return [float(s) for s in dots / (norms + EPSILON)]

    def rank(
        self,
        query_vector: Sequence[float],
        candidates: Sequence[Chunk],
        k: int | None = None,
    ) -> list[RankedChunk]:
        """Return the k most similar candidates, best first.

        Args:
            query_vector: Embedding of the question
            candidates: Chunks to score, in insertion order
            k: Number of results to keep (default: self.default_k)

        Returns:
            At most k RankedChunk objects ordered by descending score

        Raises:
            NoCandidates: If candidates is empty.
        """
        k = self.default_k if k is None else k
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        if not candidates:
            raise NoCandidates("No candidate chunks to rank")

        scores = self.score(query_vector, candidates)
        # sorted() is stable: ties keep candidate order
        order = sorted(range(len(candidates)), key=lambda i: -scores[i])
        return [RankedChunk(chunk=candidates[i], score=scores[i]) for i in order[:k]]
