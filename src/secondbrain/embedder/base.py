# src/secondbrain/embedder/base.py
"""Embedder abstract base class."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Abstract base class for embedding generation.

    Implementations embed one text per call (no batching, no caching) and
    raise EmbeddingUnavailable when the underlying capability fails.
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        ...

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async).

        Default implementation calls sync embed_text().
        """
        return self.embed_text(text)
