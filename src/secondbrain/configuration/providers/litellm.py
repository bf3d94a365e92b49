# src/secondbrain/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secondbrain.embedder import Embedder
    from secondbrain.providers import LLMClient
    from secondbrain.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for generation and embedding calls.

    Args:
        llm: LiteLLM model identifier for answer generation.
             Examples: "gemini/gemini-2.5-flash-lite", "openai/gpt-5-mini"
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "gemini/text-embedding-004", "openai/text-embedding-3-small"
        timeout: Per-request timeout in seconds (None = LiteLLM default).

    Example:
        provider = LiteLLMProvider(
            llm="gemini/gemini-2.5-flash-lite",
            embedding="gemini/text-embedding-004",
        )
    """

    llm: str = "gemini/gemini-2.5-flash-lite"
    embedding: str = "gemini/text-embedding-004"
    timeout: float | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder using the LiteLLM embedding client.

        Args:
            settings: Settings containing num_retries.
        """
        from secondbrain.embedder import ClientEmbedder
        from secondbrain.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            timeout=self.timeout,
        )
        return ClientEmbedder(embedding_client=embedding_client)

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build a LiteLLMClient for answer generation."""
        from secondbrain.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            timeout=self.timeout,
        )
