# src/secondbrain/providers/base.py
"""Abstract base classes for generation and embedding providers."""

from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Abstract base class for text generation providers.

    The interface is intentionally minimal so any chat-style API fits.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, messages, temperature=None):
                return my_api.chat(messages, temp=temperature)
    """

    @abstractmethod
    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion for the given messages.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
                      Example: [{"role": "user", "content": "Hello"}]
            temperature: Optional temperature for generation (0.0-1.0).
                         If None, use provider default.

        Returns:
            The generated text response.
        """
        ...

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion for the given messages (async).

        Default implementation calls sync complete(). Override in
        subclasses for true async behavior.
        """
        return self.complete(messages, temperature)


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, text):
                return my_api.embed(text)
    """

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Generate the embedding vector for one text."""
        ...

    async def aembed(self, text: str) -> list[float]:
        """Generate the embedding vector for one text (async).

        Default implementation calls sync embed().
        """
        return self.embed(text)
