# src/secondbrain/embedder/client.py
"""Client-based embedder implementation."""

import structlog

from secondbrain.embedder.base import Embedder
from secondbrain.exceptions import EmbeddingUnavailable
from secondbrain.providers.base import EmbeddingClient

logger = structlog.get_logger()


class ClientEmbedder(Embedder):
    """Embedder that passes each text straight to an EmbeddingClient.

    Any provider error, including timeouts, is logged and re-raised as
    EmbeddingUnavailable. The vector's dimensionality is passed through
    unchanged; the corpus store checks consistency.

    Example:
        from secondbrain.providers.litellm import LiteLLMEmbeddingClient
        from secondbrain.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="gemini/text-embedding-004")
        embedder = ClientEmbedder(embedding_client=client)
    """

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
        """
        self._client = embedding_client

    def _checked(self, vector: list[float], text: str) -> list[float]:
        if not vector:
            logger.error("embedding_empty_vector", text_length=len(text))
            raise EmbeddingUnavailable("Embedding capability returned an empty vector")
        return vector

    def embed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text."""
        try:
            vector = self._client.embed(text)
        except Exception as e:
            logger.error("embedding_failed", error=str(e), text_length=len(text))
            raise EmbeddingUnavailable(f"Embedding failed: {e}") from e
        return self._checked(vector, text)

    async def aembed_text(self, text: str) -> list[float]:
        """Generate an embedding vector for a single text (async)."""
        try:
            vector = await self._client.aembed(text)
        except Exception as e:
            logger.error("embedding_failed", error=str(e), text_length=len(text))
            raise EmbeddingUnavailable(f"Embedding failed: {e}") from e
        return self._checked(vector, text)
