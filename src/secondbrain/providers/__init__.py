# src/secondbrain/providers/__init__.py
"""Provider implementations for SecondBrain.

This module contains generation and embedding provider abstractions:
- LLMClient: Abstract base class for text generation providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations (requires: pip install secondbrain-rag[litellm])

Usage:
    from secondbrain.providers import LLMClient, EmbeddingClient
    from secondbrain.providers.litellm import LiteLLMClient, ChatModels
"""

from secondbrain.providers.base import EmbeddingClient, LLMClient

try:
    from secondbrain.providers.litellm import (
        ChatModels,
        EmbeddingModels,
        LiteLLMClient,
        LiteLLMEmbeddingClient,
    )
except ImportError:
    from secondbrain._optional import _create_missing_dependency_class

    class ChatModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    class EmbeddingModels:  # type: ignore[no-redef]
        """Placeholder - requires litellm package."""

        pass

    LiteLLMClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMClient", "litellm"
    )
    LiteLLMEmbeddingClient = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "LiteLLMEmbeddingClient", "litellm"
    )

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
