# src/secondbrain/configuration/base.py
"""Protocol definitions for configuration objects.

Provider configurations are structurally typed: any object (typically a
frozen dataclass) with the right builder methods satisfies the protocol
without inheriting from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from secondbrain.embedder import Embedder
    from secondbrain.providers import LLMClient
    from secondbrain.settings import Settings


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the two external capabilities:
    - Embedder: turns text into vectors for similarity search
    - LLMClient: generates answers from the grounding prompt

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str
            embedding: str

            def build_embedder(self, settings: Settings) -> Embedder: ...
            def build_llm_client(self, settings: Settings) -> LLMClient: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build the embedding gateway."""
        ...

    def build_llm_client(self, settings: Settings) -> LLMClient | None:
        """Build the generation client, or None to always use the fallback answer."""
        ...
