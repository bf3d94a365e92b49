# src/secondbrain/providers/litellm/__init__.py
"""LiteLLM provider clients for SecondBrain.

- LiteLLMClient: Answer generation using LiteLLM
- LiteLLMEmbeddingClient: Embeddings using LiteLLM
- ChatModels / EmbeddingModels: Curated model constants

Usage:
    from secondbrain.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

    client = LiteLLMEmbeddingClient(model=EmbeddingModels.GEMINI_004)
"""

from secondbrain.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from secondbrain.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
